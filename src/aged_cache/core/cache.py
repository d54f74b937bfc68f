"""
In-memory cache where every entry carries its own time-to-live.
Why: expired entries must disappear from lookups and from size, with no background timers.

Expiry is lazy: every public call sweeps first, then works on the live set.
An entry is expired only once the clock reading is strictly past its expiry;
at exactly ``expires_at`` it is still live.
"""

import math
from typing import Any, Dict, Hashable, Optional

from aged_cache.config.settings import get_settings

from .clock import Clock, Seconds, SystemClock, to_seconds
from .logging import get_logger, log_event
from .metrics import CacheStats

_LOG = get_logger(__name__)


class _Entry:
    __slots__ = ("key", "value", "expires_at")

    def __init__(self, key: Hashable, value: Any, expires_at: float) -> None:
        self.key = key
        self.value = value
        self.expires_at = expires_at

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at

    def __repr__(self) -> str:
        return f"_Entry(key={self.key!r}, value={self.value!r}, expires_at={self.expires_at})"


class AgedCache:
    """Key/value store with per-entry expiry.

    Args:
        clock: time source with a ``now()`` method returning seconds.
            Defaults to the wall clock.
        reject_negative_retention: raise on negative retention instead of
            storing an already-expired entry. Defaults to the
            ``AGED_CACHE_REJECT_NEGATIVE_RETENTION`` setting.

    Not thread-safe.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        reject_negative_retention: Optional[bool] = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        if reject_negative_retention is None:
            reject_negative_retention = get_settings().cache.reject_negative_retention
        self._reject_negative = reject_negative_retention
        # insertion-ordered; dicts keep order and give O(1) lookup
        self._entries: Dict[Hashable, _Entry] = {}
        self.stats = CacheStats()

    def put(self, key: Hashable, value: Any, retention: Seconds) -> None:
        """Store ``value`` under ``key`` for ``retention`` (timedelta or seconds).

        Writing an existing key replaces its value and restarts its expiry
        from the current clock reading.
        Keys must be hashable. Retention must be finite.
        """
        if key is None or value is None:
            raise ValueError("put key/value of None is not allowed")
        try:
            hash(key)
        except TypeError:
            raise ValueError(f"cache key must be hashable, got {type(key).__name__}") from None
        ttl = to_seconds(retention)
        if not math.isfinite(ttl):
            raise ValueError(f"retention must be finite, got {ttl}")
        if ttl < 0 and self._reject_negative:
            raise ValueError(f"retention must not be negative, got {ttl}s")

        self._clean()
        expires_at = self._clock.now() + ttl
        entry = self._find(key)
        if entry is None:
            self._entries[key] = _Entry(key, value, expires_at)
            self.stats.record_insert()
        else:
            entry.value = value
            entry.expires_at = expires_at
            self.stats.record_update()

    def get(self, key: Optional[Hashable]) -> Optional[Any]:
        """Return the live value for ``key``, or None."""
        self._clean()
        if key is None:
            self.stats.record_miss()
            return None
        entry = self._find(key)
        if entry is None:
            self.stats.record_miss()
            return None
        self.stats.record_hit()
        return entry.value

    def size(self) -> int:
        self._clean()
        return len(self._entries)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        self._clean()
        return key is not None and self._find(key) is not None

    def __repr__(self) -> str:
        return f"AgedCache(entries={list(self._entries.values())!r})"

    def _find(self, key: object) -> Optional[_Entry]:
        try:
            return self._entries.get(key)
        except TypeError:
            # unhashable keys can never have been stored
            return None

    def _clean(self) -> int:
        now = self._clock.now()
        expired = [k for k, e in self._entries.items() if e.is_expired(now)]
        for k in expired:
            del self._entries[k]
        if expired:
            log_event(_LOG, "sweep", evicted=len(expired), live=len(self._entries), now=now)
        self.stats.record_sweep(len(expired))
        return len(expired)
