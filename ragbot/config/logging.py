"""Logging setup for the ``ragbot`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; only the package root
logger gets handlers. Output is either a pipe-separated human format or one
JSON object per line.
"""

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .settings import Settings

ROOT_LOGGER_NAME = "ragbot"

HUMAN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s | %(message)s"
HUMAN_DATEFMT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record, with the traceback when one is attached."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, HUMAN_DATEFMT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.filename}:{record.lineno} ({record.funcName})",
        }

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Replace the handlers of the ``ragbot`` logger.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Also append records to this file (parents are created).
        json_format: Emit JSON lines instead of the human format.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = (
        JSONExceptionFormatter()
        if json_format
        else logging.Formatter(HUMAN_FORMAT, datefmt=HUMAN_DATEFMT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_logging(settings: "Settings") -> logging.Logger:
    """Apply the logging section of the application settings."""
    return setup_logging(
        settings.log_level,
        log_file=settings.log_file,
        json_format=settings.log_json,
    )
