# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: NoteDocument
# -----------------------------------------------------------------------------
from dataclasses import dataclass


@dataclass(frozen=True)
class NoteDocument:
    """One row of the input table: a note section and the text to embed."""
    name: str
    header: str
    body: str
