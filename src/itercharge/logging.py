"""Centralized and user-friendly logging setup."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path
from typing import Any

from .config import log_file_path, settings

__all__ = ["FriendlyFormatter", "setup_logging"]


class FriendlyFormatter(logging.Formatter):
    """Formatter with aligned level labels and short logger names."""

    LEVEL_ALIASES = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO ",
        logging.WARNING: "WARN ",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRIT ",
    }

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        record.level_label = self.LEVEL_ALIASES.get(record.levelno, record.levelname)
        record.clean_name = record.name.split(".")[-1]
        return super().format(record)


def setup_logging(level: str | int | None = None, log_directory: str | Path | None = None) -> None:
    """Configure console logging, plus a rotating file when a directory is given."""

    effective_level = _normalize_level(level or settings.log_level)
    log_file = log_file_path(log_directory) if log_directory is not None else settings.log_file()

    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": effective_level,
            "stream": "ext://sys.stderr",
        },
    }

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_file),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 2,
            "encoding": "utf-8",
            "formatter": "file",
            "level": "DEBUG",
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "()": "itercharge.logging.FriendlyFormatter",
                    "format": "%(asctime)s | %(level_label)s | %(clean_name)s:%(lineno)d | %(message)s",
                },
                "file": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                },
            },
            "handlers": handlers,
            "root": {
                "handlers": list(handlers),
                "level": effective_level,
            },
        }
    )


def _normalize_level(level: str | int) -> int:
    """Map a level name such as ``"debug"`` or a numeric level to its integer."""

    if isinstance(level, int) and not isinstance(level, bool):
        return level

    name = str(level).strip().upper()
    resolved = logging.getLevelName(name)
    # getLevelName answers "Level X" for names it does not know.
    if not isinstance(resolved, int):
        known = ", ".join(("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))
        raise ValueError(f"Unknown log level {level!r}; expected one of {known}")
    return resolved
