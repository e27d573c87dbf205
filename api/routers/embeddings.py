# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: embeddings router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends

from api.dependencies import get_search_service
from api.http_errors import to_http_exception
from api.schemas.embeddings import CostEstimateResponse, EmbeddingFileExistsResponse, GenerateResponse
from services.SemanticSearchService import SemanticSearchService
from utility.errors import SemanticSearchError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/embeddings", tags=["embeddings"])


@router.post("/generate", response_model=GenerateResponse)
def post_generate(
    svc: SemanticSearchService = Depends(get_search_service),
) -> GenerateResponse:
    logger.info("POST /embeddings/generate called")
    try:
        written = svc.generate_embeddings()
    except SemanticSearchError as e:
        logger.error("Embedding generation failed: %s", e)
        raise to_http_exception(e)

    return GenerateResponse(status="ok", records_written=written)


@router.get("/cost", response_model=CostEstimateResponse)
def get_input_cost(
    svc: SemanticSearchService = Depends(get_search_service),
) -> CostEstimateResponse:
    try:
        estimate = svc.estimate_input_cost()
    except SemanticSearchError as e:
        logger.error("Input cost estimate failed: %s", e)
        raise to_http_exception(e)

    return CostEstimateResponse(estimate_usd=estimate)


@router.get("/exists", response_model=EmbeddingFileExistsResponse)
def get_exists(
    svc: SemanticSearchService = Depends(get_search_service),
) -> EmbeddingFileExistsResponse:
    return EmbeddingFileExistsResponse(exists=svc.embedding_file_exists())
