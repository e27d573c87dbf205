# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: SimilarityRanker
# -----------------------------------------------------------------------------
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from embedding.EmbeddingRecord import EmbeddingRecord
from utility.errors import VectorDimensionError
from utility.logging_utils import get_class_logger


@dataclass(frozen=True)
class RankedSuggestion:
    name: str
    header: str


@dataclass(frozen=True)
class ScoredRow:
    name: str
    header: str
    score: float

    def to_suggestion(self) -> RankedSuggestion:
        return RankedSuggestion(name=self.name, header=self.header)


def cosine_similarity(left: Sequence[float], right: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|), in [-1, 1].

    Returns NaN when either vector has zero magnitude. Raises
    VectorDimensionError when the lengths differ.
    """
    a = np.asarray(left, dtype=np.float64)
    b = np.asarray(right, dtype=np.float64)
    if a.shape != b.shape:
        raise VectorDimensionError(f"Cannot compare vectors of shape {a.shape} and {b.shape}")

    denom = np.linalg.norm(a) * np.linalg.norm(b)
    if denom == 0.0 or not np.isfinite(denom):
        return math.nan
    return float(np.dot(a, b) / denom)


def _sort_key(row: ScoredRow):
    # NaN sorts below every real score
    return (not math.isnan(row.score), row.score if not math.isnan(row.score) else 0.0)


class SimilarityRanker:
    """Linear scan: score every stored record against the query, best first."""

    def __init__(self, *, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_class_logger(self.__class__)

    def rank(self, query_vector: Sequence[float], records: Sequence[EmbeddingRecord]) -> List[ScoredRow]:
        scored = []
        for r in records:
            try:
                score = cosine_similarity(query_vector, r.vector)
            except VectorDimensionError:
                self.logger.error(
                    "Stored record name=%r header=%r has %d dimensions, query has %d",
                    r.name, r.header, len(r.vector), len(query_vector),
                )
                raise
            scored.append(ScoredRow(name=r.name, header=r.header, score=score))

        unscorable = sum(1 for s in scored if math.isnan(s.score))
        if unscorable:
            self.logger.warning("%d records had zero-magnitude vectors and rank last", unscorable)

        scored.sort(key=_sort_key, reverse=True)
        return scored

    def top_k(
            self,
            query_vector: Sequence[float],
            records: Sequence[EmbeddingRecord],
            k: int,
    ) -> List[RankedSuggestion]:
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")

        ranked = self.rank(query_vector, records)
        self.logger.debug(
            "Ranked %d records; top score=%s",
            len(ranked),
            ranked[0].score if ranked else None,
        )
        return [row.to_suggestion() for row in ranked[:k]]
