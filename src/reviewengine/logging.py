"""Logging setup: one stderr handler on the root logger, text or JSON lines."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reviewengine.config.settings import Settings

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Transport libraries that log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "openai")

# Passed through ``extra=`` by the AI layer.
_CONTEXT_FIELDS = ("file_path", "model", "provider")


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, with review context fields when set."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, str(getattr(record, field)))
            for field in _CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _formatter_for(log_format: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return JsonLineFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(settings: Settings) -> None:
    """Replace root handlers with a single handler built from *settings*.

    Safe to call repeatedly. Transport loggers stay at WARNING unless the
    root level is DEBUG.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_formatter_for(settings.log_format))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    quiet = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
