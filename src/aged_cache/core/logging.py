"""
JSON logging for cache events.
Why: sweep activity (evicted/live counts, clock reading) should land as queryable fields, not prose.

Cache code logs through ``log_event``; the fields travel on the record as
``cache_fields`` and ``_JsonFormatter`` flattens them into the JSON line.
Nothing here runs on import; ``setup_logging`` is opt-in for applications.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

PACKAGE_LOGGER = "aged_cache"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        payload.update(getattr(record, "cache_fields", None) or {})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def log_event(logger: logging.Logger, event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, event, extra={"cache_fields": fields})


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Send ``aged_cache`` records to stderr as JSON lines. Safe to call twice."""
    if level is None:
        from aged_cache.config.settings import get_settings

        level = get_settings().logging.level
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(h.formatter, _JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
