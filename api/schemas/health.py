# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: health.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    message: str
