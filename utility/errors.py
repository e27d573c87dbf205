# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: errors.py
# -----------------------------------------------------------------------------
from typing import Optional


class SemanticSearchError(Exception):
    """Base class for every error raised by the embedding / search pipeline."""


# --- storage ---

class StorageError(SemanticSearchError):
    """Underlying storage could not be read, written or deleted."""


class StoreNotFoundError(StorageError):
    """A file the operation depends on does not exist."""


class MalformedTableError(SemanticSearchError):
    """Wrong column count or an unparsable numeric field in a CSV table."""

    def __init__(self, message: str, *, path: Optional[str] = None, row: Optional[int] = None):
        self.path = path
        self.row = row
        where = ""
        if path is not None:
            where = f"{path}"
            if row is not None:
                where += f" (row {row})"
            where += ": "
        super().__init__(f"{where}{message}")


# --- embedding provider ---

class EmbeddingRequestError(SemanticSearchError):
    """An embedding request could not be built."""


class EmbeddingTransportError(SemanticSearchError):
    """The provider could not be reached at all."""


class EmbeddingApiError(SemanticSearchError):
    """
    Non-success status from the provider, carrying the provider's own
    structured error (message / type / param / code).
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        error_type: Optional[str] = None,
        param: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.param = param
        self.code = code
        super().__init__(f"[{status_code}] {error_type or 'api_error'}: {message}")

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class ResponseDeserializeError(SemanticSearchError):
    """The provider's payload (success or error shape) could not be deserialized."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class EmbeddingCorrelationError(SemanticSearchError):
    """A response vector could not be matched to its input document (or vice versa)."""


# --- pipeline ---

class InvalidBatchCountError(SemanticSearchError, ValueError):
    """Batch count must be a positive integer."""


class GenerationInProgressError(SemanticSearchError):
    """A generation run is already rewriting the embedding store."""


class VectorDimensionError(SemanticSearchError, ValueError):
    """Two vectors compared for similarity have different lengths."""
