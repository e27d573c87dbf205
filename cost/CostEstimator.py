# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: CostEstimator
# -----------------------------------------------------------------------------
from functools import lru_cache
from typing import Iterable

import tiktoken

from document.NoteDocument import NoteDocument

# The tiktoken encoder used by the ada-002 embedding model
ENCODING_NAME = "cl100k_base"

# USD per token (0.0004 per 1K tokens)
TOKEN_COST = 0.0004 / 1000


@lru_cache(maxsize=1)
def _encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding(ENCODING_NAME)


def count_tokens(text: str) -> int:
    # special-token text in notes is counted, not rejected
    return len(_encoding().encode(text, allowed_special="all"))


def estimate_cost(text: str) -> float:
    return count_tokens(text) * TOKEN_COST


def estimate_documents_cost(documents: Iterable[NoteDocument]) -> float:
    """All bodies joined with no separator, estimated as one string."""
    return estimate_cost("".join(d.body for d in documents))
