# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

import settings

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings)
    openai_api_key: str
    openai_base_url: str = settings.DEFAULT_API_BASE
    openai_org: str = ""

    # Local data directory holding input.csv / embedding.csv
    data_dir: str = "./data"

    # Number of sequential batches per generation run
    num_batches: int = settings.DEFAULT_NUM_BATCHES

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_org": "OPENAI_ORG_ID",
        "data_dir": "SEMSEARCH_DATA_DIR",
        "num_batches": "SEMSEARCH_NUM_BATCHES",
    }

    # Fields that may legitimately be blank
    OPTIONAL_FIELDS = ("openai_org",)

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        raw_batches = os.getenv(Config.ENV_VARS["num_batches"], "").strip()
        try:
            num_batches = int(raw_batches) if raw_batches else settings.DEFAULT_NUM_BATCHES
        except ValueError as e:
            raise ValueError(
                f"{Config.ENV_VARS['num_batches']} must be an int, got {raw_batches!r}"
            ) from e

        return Config(
            openai_api_key=os.getenv(Config.ENV_VARS["openai_api_key"], ""),
            openai_base_url=os.getenv(Config.ENV_VARS["openai_base_url"], "") or settings.DEFAULT_API_BASE,
            openai_org=os.getenv(Config.ENV_VARS["openai_org"], ""),
            data_dir=os.getenv(Config.ENV_VARS["data_dir"], "") or "./data",
            num_batches=num_batches,
        )

    def __post_init__(self):
        """
        Fail fast if any required config is missing, or if the batch
        count could not drive a generation run.
        """
        missing_fields = [
            k for k, v in self.__dict__.items()
            if k not in self.OPTIONAL_FIELDS and isinstance(v, str) and not v
        ]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if self.num_batches < 1:
            raise ValueError(
                f"{self.ENV_VARS['num_batches']} must be >= 1, got {self.num_batches}"
            )

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url,
            "openai_org": self.openai_org or None,
            "data_dir": self.data_dir,
            "num_batches": self.num_batches,
        }
