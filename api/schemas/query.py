# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: query.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import Field, BaseModel

class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1)
    top_k: int = Field(10, ge=1, le=50)
    # Overrides the configured key for this call only
    api_key: Optional[str] = None

class Suggestion(BaseModel):
    name: str
    header: str

class QueryResponse(BaseModel):
    query: str
    top_k: int
    results: List[Suggestion]

class QueryCostRequest(BaseModel):
    text: str

class QueryCostResponse(BaseModel):
    estimate_usd: float
