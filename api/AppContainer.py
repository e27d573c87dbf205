# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from config.Config import Config
from embedding.EmbeddingClient import EmbeddingClient
from search.SimilarityRanker import SimilarityRanker
from services.SemanticSearchService import SemanticSearchService
from storage.FileProcessor import FileProcessor
from utility.logging_utils import get_class_logger


class AppContainer:
    """
    Owns object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Configuration loaded: %r", self.cfg.summary())

        # Core infrastructure
        self.file_processor = FileProcessor(self.cfg.data_dir)
        self.client = EmbeddingClient.from_config(self.cfg)
        self.ranker = SimilarityRanker()

        # Return a singleton SemanticSearchService instance
        self.search_service = SemanticSearchService(
            file_processor=self.file_processor,
            client=self.client,
            num_batches=self.cfg.num_batches,
            ranker=self.ranker,
        )

    def close(self) -> None:
        self.client.close()
