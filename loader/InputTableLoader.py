# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: InputTableLoader
# -----------------------------------------------------------------------------
import csv
import io
import logging
from typing import List, Optional

import settings
from document.NoteDocument import NoteDocument
from storage.FileProcessor import FileProcessor
from utility.errors import MalformedTableError
from utility.logging_utils import get_class_logger

MIN_COLUMNS = 3


def parse_documents(text: str, *, path: Optional[str] = None) -> List[NoteDocument]:
    """
    Parse the input table: a header row, then rows of name, header, body
    (extra trailing columns are allowed but every row must have the same width).
    """
    reader = csv.reader(io.StringIO(text))
    documents: List[NoteDocument] = []
    width: Optional[int] = None

    for line_no, row in enumerate(reader, start=1):
        if not row:
            continue
        fields = [f.strip() for f in row]

        if width is None:
            width = len(fields)
            if width < MIN_COLUMNS:
                raise MalformedTableError(
                    f"Expected at least {MIN_COLUMNS} columns, header has {width}",
                    path=path, row=line_no,
                )
            continue

        if len(fields) != width:
            raise MalformedTableError(
                f"Expected {width} fields, found {len(fields)}", path=path, row=line_no
            )

        documents.append(NoteDocument(name=fields[0], header=fields[1], body=fields[2]))

    return documents


class InputTableLoader:
    def __init__(
            self,
            file_processor: FileProcessor,
            *,
            path: str = settings.DATA_FILE_PATH,
            logger: Optional[logging.Logger] = None,
    ):
        self.file_processor = file_processor
        self.path = path
        self.logger = logger or get_class_logger(self.__class__)

    def load(self) -> List[NoteDocument]:
        text = self.file_processor.read_from_path(self.path)
        documents = parse_documents(text, path=self.path)
        self.logger.info("Found %d records in '%s'", len(documents), self.path)
        return documents
