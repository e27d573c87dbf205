# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: EmbeddingStore
# -----------------------------------------------------------------------------
import csv
import io
import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

import settings
from embedding.EmbeddingRecord import EmbeddingRecord
from storage.FileProcessor import FileProcessor
from utility.errors import MalformedTableError
from utility.logging_utils import get_class_logger

# Row layout: name, header, comma-joined float32 vector
STORE_COLUMNS = ("name", "header", "embedding")
VECTOR_DELIMITER = ","


def format_vector(vector: np.ndarray) -> str:
    # str() of a float32 scalar is the shortest text that parses back to the same value
    arr = np.asarray(vector, dtype=np.float32)
    return VECTOR_DELIMITER.join(str(v) for v in arr)


def parse_vector(field: str, *, path: Optional[str] = None, row: Optional[int] = None) -> np.ndarray:
    values: List[float] = []
    for token in field.split(VECTOR_DELIMITER):
        token = token.strip()
        try:
            values.append(float(token))
        except ValueError:
            raise MalformedTableError(
                f"Invalid vector component {token!r}", path=path, row=row
            ) from None
    return np.asarray(values, dtype=np.float32)


def encode_rows(records: Iterable[EmbeddingRecord], *, include_header: bool = False) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    if include_header:
        writer.writerow(STORE_COLUMNS)
    for rec in records:
        writer.writerow([rec.name, rec.header, format_vector(rec.vector)])
    return buf.getvalue()


def decode_rows(text: str, *, path: Optional[str] = None) -> List[EmbeddingRecord]:
    """
    Parse store text back into records. The first row is the column header.
    Every data row must have exactly three fields; fields are trimmed.
    """
    records: List[EmbeddingRecord] = []
    reader = csv.reader(io.StringIO(text))

    header_seen = False
    for line_no, row in enumerate(reader, start=1):
        if not row:
            continue
        fields = [f.strip() for f in row]

        if not header_seen:
            header_seen = True
            if tuple(fields) != STORE_COLUMNS:
                raise MalformedTableError(
                    f"Expected header {list(STORE_COLUMNS)}, got {fields}", path=path, row=line_no
                )
            continue

        if len(fields) != len(STORE_COLUMNS):
            raise MalformedTableError(
                f"Expected {len(STORE_COLUMNS)} fields, found {len(fields)}", path=path, row=line_no
            )

        name, header, raw_vector = fields
        records.append(EmbeddingRecord(
            name=name,
            header=header,
            vector=parse_vector(raw_vector, path=path, row=line_no),
        ))

    return records


class EmbeddingStore:
    """
    The persisted (name, header, vector) table.

    A generation run calls reset() once, then append() once per batch, so a
    run that dies midway leaves every batch written before the failure.
    """

    def __init__(
            self,
            file_processor: FileProcessor,
            *,
            path: str = settings.EMBEDDING_FILE_PATH,
            logger: Optional[logging.Logger] = None,
    ):
        self.file_processor = file_processor
        self.path = path
        self.logger = logger or get_class_logger(self.__class__)

    def exists(self) -> bool:
        return self.file_processor.check_file_exists_at_path(self.path)

    def delete(self) -> bool:
        return self.file_processor.delete_file_at_path(self.path)

    def create(self) -> None:
        """Write an empty (header only) store, replacing anything at the path."""
        self.file_processor.write_to_path(self.path, encode_rows([], include_header=True))

    def reset(self) -> None:
        """Drop any previous contents and leave an empty store."""
        removed = self.delete()
        self.create()
        self.logger.info(
            "Embedding store '%s' reset (previous contents %s)",
            self.path,
            "deleted" if removed else "absent",
        )

    def append(self, records: Sequence[EmbeddingRecord]) -> None:
        if not records:
            return
        self.file_processor.append_to_path(self.path, encode_rows(records))
        self.logger.debug("Appended %d records to '%s'", len(records), self.path)

    def load(self) -> List[EmbeddingRecord]:
        text = self.file_processor.read_from_path(self.path)
        records = decode_rows(text, path=self.path)
        self.logger.debug("Loaded %d records from '%s'", len(records), self.path)
        return records
