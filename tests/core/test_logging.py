"""Tests for JSON cache-event logging."""

import json
import logging
from io import StringIO

from aged_cache import AgedCache
from aged_cache.core.clock import ManualClock
from aged_cache.core.logging import PACKAGE_LOGGER, _JsonFormatter, get_logger, log_event, setup_logging


def _capture(logger_name: str):
    logger = get_logger(logger_name)
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger, handler, stream


def test_setup_logging_attaches_one_json_handler():
    """Test that setup_logging is idempotent on the package logger."""
    logger = setup_logging(logging.WARNING)
    setup_logging(logging.WARNING)
    json_handlers = [h for h in logger.handlers if isinstance(h.formatter, _JsonFormatter)]
    assert logger.name == PACKAGE_LOGGER
    assert len(json_handlers) == 1
    assert logger.level == logging.WARNING
    for h in json_handlers:
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


def test_log_event_fields_become_json_keys():
    """Test that event fields are flattened into the JSON line."""
    logger, handler, stream = _capture("aged_cache.test.event")
    log_event(logger, "sweep", evicted=2, live=5)
    logger.removeHandler(handler)

    parsed = json.loads(stream.getvalue().strip())
    assert parsed["level"] == "DEBUG"
    assert parsed["logger"] == "aged_cache.test.event"
    assert parsed["event"] == "sweep"
    assert parsed["evicted"] == 2
    assert parsed["live"] == 5


def test_log_event_skipped_below_level():
    """Test that disabled levels emit nothing."""
    logger, handler, stream = _capture("aged_cache.test.quiet")
    logger.setLevel(logging.INFO)
    log_event(logger, "sweep", evicted=1)
    logger.removeHandler(handler)
    assert stream.getvalue() == ""


def test_sweep_logs_evictions_as_json():
    """Test that an evicting sweep reports counts and the clock reading."""
    clock = ManualClock(start=100)
    cache = AgedCache(clock)
    cache.put("a", "1", 1)
    cache.put("b", "2", 5)
    clock.advance(2)

    logger, handler, stream = _capture("aged_cache.core.cache")
    cache.size()
    cache.size()
    logger.removeHandler(handler)

    lines = stream.getvalue().strip().splitlines()
    assert len(lines) == 1
    parsed = json.loads(lines[0])
    assert parsed["event"] == "sweep"
    assert parsed["evicted"] == 1
    assert parsed["live"] == 1
    assert parsed["now"] == 102.0
