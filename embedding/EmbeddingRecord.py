# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass

import numpy as np


@dataclass
class EmbeddingRecord:
    """Embedding vector + the identity of the note section it came from."""
    name: str
    header: str
    vector: np.ndarray

    def __post_init__(self) -> None:
        self.vector = np.asarray(self.vector, dtype=np.float32)
