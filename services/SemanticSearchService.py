# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: SemanticSearchService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import threading
from typing import List, Optional

import settings
from config.Config import Config
from cost.CostEstimator import estimate_cost, estimate_documents_cost
from embedding.BatchScheduler import BatchScheduler
from embedding.EmbeddingClient import EmbeddingClient
from loader.InputTableLoader import InputTableLoader
from search.SimilarityRanker import RankedSuggestion, SimilarityRanker
from storage.EmbeddingStore import EmbeddingStore
from storage.FileProcessor import FileProcessor
from utility.errors import EmbeddingCorrelationError, GenerationInProgressError
from utility.logging_utils import get_class_logger


class SemanticSearchService:
    """
    The operations the host application calls:
      - generate_embeddings(): delete + rebuild the embedding store
      - estimate_input_cost(): token cost of embedding the input table
      - embedding_file_exists(): has a store been generated
      - get_suggestions(): query -> ranked (name, header) pairs
      - get_query_cost_estimate(): token cost of arbitrary text

    Only one generation run may be in flight per service instance. Queries
    only read the store and are refused while a run is rewriting it.
    """

    def __init__(
        self,
        *,
        file_processor: FileProcessor,
        client: EmbeddingClient,
        num_batches: int,
        ranker: SimilarityRanker | None = None,
        input_path: str = settings.DATA_FILE_PATH,
        embedding_path: str = settings.EMBEDDING_FILE_PATH,
        logger: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.input_loader = InputTableLoader(file_processor, path=input_path)
        self.store = EmbeddingStore(file_processor, path=embedding_path)
        self.scheduler = BatchScheduler(client, num_batches=num_batches)
        self.ranker = ranker or SimilarityRanker()
        self.logger = logger or get_class_logger(self.__class__)
        self._generation_lock = threading.Lock()
        self._state_lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: Config, **kwargs) -> "SemanticSearchService":
        return cls(
            file_processor=FileProcessor(cfg.data_dir),
            client=EmbeddingClient.from_config(cfg),
            num_batches=cfg.num_batches,
            **kwargs,
        )

    @property
    def generation_in_progress(self) -> bool:
        return self._generation_lock.locked()

    def _refuse_during_generation(self) -> None:
        if self.generation_in_progress:
            raise GenerationInProgressError(
                "Embedding store is being regenerated; retry the query when the run completes"
            )

    def generate_embeddings(self) -> int:
        """Returns the number of records written to the store."""
        with self._state_lock:
            started = self._generation_lock.acquire(blocking=False)
        if not started:
            raise GenerationInProgressError("An embedding generation run is already in progress")

        try:
            self.store.delete()
            documents = self.input_loader.load()
            self.store.create()
            written = self.scheduler.run(documents, self.store.append)
            self.logger.info("Saved %d embeddings to '%s'", written, self.store.path)
            return written
        finally:
            self._generation_lock.release()

    def estimate_input_cost(self) -> float:
        documents = self.input_loader.load()
        estimate = estimate_documents_cost(documents)
        self.logger.info("Input cost estimate for %d records: $%.6f", len(documents), estimate)
        return estimate

    def embedding_file_exists(self) -> bool:
        return self.store.exists()

    def get_suggestions(
        self,
        api_key: Optional[str],
        query: str,
        top_k: int = settings.DEFAULT_TOP_K,
    ) -> List[RankedSuggestion]:
        if not query or not query.strip():
            raise ValueError("query must not be empty")

        client = self.client.with_api_key(api_key) if api_key else self.client

        # a run cannot start while the store is being read
        with self._state_lock:
            self._refuse_during_generation()
            records = self.store.load()
        response = client.get_embedding([query])
        self.logger.debug("Successfully obtained %d embeddings", len(response.data))
        if not response.data:
            raise EmbeddingCorrelationError("Cannot find matching embedding for query")

        query_vector = response.data[0].embedding
        suggestions = self.ranker.top_k(query_vector, records, top_k)
        self.logger.info(
            "Query %r ranked %d records, returning %d suggestions",
            query, len(records), len(suggestions),
        )
        return suggestions

    @staticmethod
    def get_query_cost_estimate(text: str) -> float:
        return estimate_cost(text)
