# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: query router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_search_service
from api.http_errors import to_http_exception
from api.schemas.query import QueryCostRequest, QueryCostResponse, QueryRequest, QueryResponse, Suggestion
from services.SemanticSearchService import SemanticSearchService
from utility.errors import SemanticSearchError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
def post_query(
    req: QueryRequest,
    svc: SemanticSearchService = Depends(get_search_service),
) -> QueryResponse:
    query_text = (req.query or "").strip()
    if not query_text:
        raise HTTPException(status_code=400, detail="query must not be empty")

    try:
        suggestions = svc.get_suggestions(req.api_key, query_text, top_k=req.top_k)
    except SemanticSearchError as e:
        logger.exception("Query failed: %s", e)
        raise to_http_exception(e)

    return QueryResponse(
        query=query_text,
        top_k=req.top_k,
        results=[Suggestion(name=s.name, header=s.header) for s in suggestions],
    )


@router.post("/cost", response_model=QueryCostResponse)
def post_query_cost(req: QueryCostRequest) -> QueryCostResponse:
    return QueryCostResponse(estimate_usd=SemanticSearchService.get_query_cost_estimate(req.text))
