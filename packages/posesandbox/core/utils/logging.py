"""Logging setup for PoseSandbox.

Everything logs through module-level ``logging.getLogger(__name__)`` loggers;
this module only decides where records go and what they look like:

- text lines (default) or JSON lines (``structured=True``)
- stdout or a file
- batch context attached via :func:`get_logger` (e.g. ``batch_size`` for
  pose pack imports)
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO/DEBUG
NOISY_LOGGERS = ("asyncio",)

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Shape::

        {"level": "WARNING", "message": "Failed to import pose: a.json",
         "timestamp": "...+00:00",
         "context": {"logger_name": "...", "module": "...", "function": "...",
                     "line": 42, "batch_size": 3, "error_type": "...", ...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            context["error_type"] = exc_type.__name__
            context["error_message"] = str(exc_value)
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        context.update(_extra_fields(record))

        return json.dumps(
            {
                "level": record.levelname,
                "message": record.getMessage(),
                "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
                "context": context,
            },
            default=str,
        )


def _build_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename, encoding="utf-8")
    return logging.StreamHandler(sys.stdout)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Install a single root handler, replacing any earlier configuration.

    Args:
        level: Level name, any case (e.g. ``"debug"``)
        format_string: Text format; ignored when ``structured`` is set
        filename: Log file path; stdout when None
        structured: Emit JSON lines via StructuredJSONFormatter

    Example:
        >>> configure_logging(level="DEBUG", structured=True, filename="import.jsonl")
    """
    handler = _build_handler(filename)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, bound to ``context`` when any is given.

    Bound context shows up on every record (and in the structured ``context``
    object), e.g. ``get_logger(__name__, batch_size=12)``.
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, context) if context else logger
