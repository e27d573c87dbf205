# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: types.py
# -----------------------------------------------------------------------------
from typing import List, Optional, Union

from pydantic import BaseModel, Field


EmbeddingInput = Union[str, List[str]]


class EmbeddingRequest(BaseModel):
    model: str = Field(..., min_length=1)
    input: EmbeddingInput
    user: Optional[str] = None

    def input_list(self) -> List[str]:
        return [self.input] if isinstance(self.input, str) else list(self.input)


class EmbeddingData(BaseModel):
    embedding: List[float]
    index: Optional[int] = None
    object: Optional[str] = None


class EmbeddingUsage(BaseModel):
    prompt_tokens: int = 0
    total_tokens: int = 0


class EmbeddingResponse(BaseModel):
    data: List[EmbeddingData]
    object: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[EmbeddingUsage] = None


class ApiErrorDetail(BaseModel):
    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None


class WrappedError(BaseModel):
    """Provider error envelope: {"error": {...}}"""
    error: ApiErrorDetail
