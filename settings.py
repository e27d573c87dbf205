# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Updated: 2026-02-09
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


# -----------------------------------------------------------------------------
# Files (relative to the data directory)
# -----------------------------------------------------------------------------
DATA_FILE_PATH = _env("SEMSEARCH_DATA_FILE", "input.csv")
EMBEDDING_FILE_PATH = _env("SEMSEARCH_EMBEDDING_FILE", "embedding.csv")


# -----------------------------------------------------------------------------
# Embedding provider
# -----------------------------------------------------------------------------
DEFAULT_API_BASE = _env("SEMSEARCH_DEFAULT_API_BASE", "https://api.openai.com/v1")
EMBEDDING_MODEL = _env("SEMSEARCH_EMBEDDING_MODEL", "text-embedding-ada-002")

# Name for organization header
ORGANIZATION_HEADER = "OpenAI-Organization"


# -----------------------------------------------------------------------------
# Query defaults
# -----------------------------------------------------------------------------
DEFAULT_TOP_K = _env_int("SEMSEARCH_DEFAULT_TOP_K", 10)
DEFAULT_NUM_BATCHES = _env_int("SEMSEARCH_DEFAULT_NUM_BATCHES", 1)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if not DATA_FILE_PATH or not EMBEDDING_FILE_PATH:
    raise RuntimeError("Input and embedding file names must not be empty")

if DATA_FILE_PATH == EMBEDDING_FILE_PATH:
    raise RuntimeError("Input and embedding files must be different paths")

if DEFAULT_TOP_K < 1:
    raise RuntimeError("SEMSEARCH_DEFAULT_TOP_K must be >= 1")
