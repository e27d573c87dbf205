# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: http_errors.py
# -----------------------------------------------------------------------------
from fastapi import HTTPException

from utility.errors import (
    EmbeddingApiError,
    EmbeddingCorrelationError,
    EmbeddingTransportError,
    GenerationInProgressError,
    MalformedTableError,
    ResponseDeserializeError,
    SemanticSearchError,
    StoreNotFoundError,
)


def to_http_exception(e: SemanticSearchError) -> HTTPException:
    """Map a pipeline error onto the status the API reports for it."""
    if isinstance(e, EmbeddingApiError):
        return HTTPException(
            status_code=502,
            detail={
                "provider_status": e.status_code,
                "type": e.error_type,
                "code": e.code,
                "message": e.message,
            },
        )
    if isinstance(e, (ResponseDeserializeError, EmbeddingCorrelationError, EmbeddingTransportError)):
        return HTTPException(status_code=502, detail=str(e))
    if isinstance(e, StoreNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, MalformedTableError):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, GenerationInProgressError):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))
