# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: FileProcessor
# -----------------------------------------------------------------------------
import logging
from pathlib import Path
from typing import Optional

from utility.errors import StorageError, StoreNotFoundError
from utility.logging_utils import get_class_logger


class FileProcessor:
    """
    Text file primitives scoped to one data directory.

    Provides:
      - read_from_path(): whole-file read
      - write_to_path() / append_to_path(): whole-file write / append
      - delete_file_at_path(): remove if present
      - check_file_exists_at_path(): existence probe

    Paths are relative to ``root``; anything resolving outside it is refused.
    """

    def __init__(self, root: str | Path, *, logger: Optional[logging.Logger] = None):
        self.root = Path(root).resolve()
        self.logger = logger or get_class_logger(self.__class__)

    def _resolve(self, path: str) -> Path:
        full = (self.root / path).resolve()
        if full != self.root and self.root not in full.parents:
            raise StorageError(f"Path '{path}' escapes data directory '{self.root}'")
        return full

    def read_from_path(self, path: str) -> str:
        full = self._resolve(path)
        try:
            data = full.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            self.logger.error("File '%s' not found", full)
            raise StoreNotFoundError(f"File not found: {full}") from e
        except OSError as e:
            self.logger.error("Failed to read '%s': %s", full, e)
            raise StorageError(f"Failed to read {full}: {e}") from e

        self.logger.debug("Read %d chars from '%s'", len(data), full)
        return data

    def write_to_path(self, path: str, data: str) -> None:
        full = self._resolve(path)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            full.write_text(data, encoding="utf-8", newline="")
        except OSError as e:
            self.logger.error("Failed to write '%s': %s", full, e)
            raise StorageError(f"Failed to write {full}: {e}") from e
        self.logger.debug("Wrote %d chars to '%s'", len(data), full)

    def append_to_path(self, path: str, data: str) -> None:
        full = self._resolve(path)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            with full.open("a", encoding="utf-8", newline="") as fh:
                fh.write(data)
        except OSError as e:
            self.logger.error("Failed to append to '%s': %s", full, e)
            raise StorageError(f"Failed to append to {full}: {e}") from e
        self.logger.debug("Appended %d chars to '%s'", len(data), full)

    def delete_file_at_path(self, path: str) -> bool:
        """Delete the file if it exists. Returns True if something was removed."""
        full = self._resolve(path)
        try:
            full.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.error("Failed to delete '%s': %s", full, e)
            raise StorageError(f"Failed to delete {full}: {e}") from e

        self.logger.info("Deleted '%s'", full)
        return True

    def check_file_exists_at_path(self, path: str) -> bool:
        return self._resolve(path).is_file()
