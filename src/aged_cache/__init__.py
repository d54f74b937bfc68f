"""In-memory key/value cache with per-entry time-to-live."""

from aged_cache.core.cache import AgedCache
from aged_cache.core.clock import Clock, ManualClock, SystemClock

__all__ = ["AgedCache", "Clock", "ManualClock", "SystemClock"]
