# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
import threading
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog

BASE_LOGGER_NAME = "semantic_search"

CONSOLE_FORMAT = (
    "%(log_color)s%(asctime)s [%(levelname)s] "
    "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
)
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configure_lock = threading.Lock()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y")


@dataclass(frozen=True)
class LogSettings:
    level: int = logging.INFO
    to_file: bool = False
    file_path: str = "./logs/semantic_search.log"
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LogSettings":
        level_name = os.getenv("SEMSEARCH_LOG_LEVEL", "INFO").strip().upper()
        return cls(
            level=getattr(logging, level_name, logging.INFO),
            to_file=_env_flag("SEMSEARCH_LOG_TO_FILE", False),
            file_path=os.getenv("SEMSEARCH_LOG_FILE", cls.file_path),
            max_bytes=int(os.getenv("SEMSEARCH_LOG_MAX_BYTES", str(cls.max_bytes))),
            backup_count=int(os.getenv("SEMSEARCH_LOG_BACKUP_COUNT", str(cls.backup_count))),
        )


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=CONSOLE_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
            secondary_log_colors={
                "message": {
                    "WARNING": "yellow",
                    "ERROR": "light_red",
                    "CRITICAL": "red",
                }
            },
        )
    )
    return handler


def _file_handler(log_settings: LogSettings) -> logging.Handler:
    path = Path(log_settings.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=log_settings.max_bytes,
        backupCount=log_settings.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging(log_settings: Optional[LogSettings] = None) -> logging.Logger:
    """
    Attach handlers to the `semantic_search` parent logger once.

    Every logger handed out below is a child of it and propagates up, so the
    store, scheduler, client and routers all share one console (and optional
    rotating file) output. Calling again is a no-op unless handlers were
    removed.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    with _configure_lock:
        if base.handlers:
            return base

        log_settings = log_settings or LogSettings.from_env()
        base.addHandler(_console_handler())
        if log_settings.to_file:
            base.addHandler(_file_handler(log_settings))

        base.setLevel(log_settings.level)
        # uvicorn configures the root logger; keep our records out of it
        base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Module-level logger, e.g. get_logger(__name__) in the API routers."""
    configure_logging()
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after module + class:

      semantic_search.embedding.EmbeddingClient.EmbeddingClient
      semantic_search.embedding.BatchScheduler.BatchScheduler
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return get_logger(f"{module}.{classname}")
