# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: embeddings.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel

class GenerateResponse(BaseModel):
    status: str
    records_written: int

class CostEstimateResponse(BaseModel):
    estimate_usd: float

class EmbeddingFileExistsResponse(BaseModel):
    exists: bool
