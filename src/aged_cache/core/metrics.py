"""
In-memory counters for cache activity.
Why: cheap visibility into hit ratio and eviction churn without external tooling.
"""

from .schemas import StatsSnapshot


def _ratio(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part / whole


class CacheStats:
    def __init__(self) -> None:
        self.hits = 0
        self.misses = 0
        self.inserts = 0
        self.updates = 0
        self.evictions = 0
        self.sweeps = 0

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def record_insert(self) -> None:
        self.inserts += 1

    def record_update(self) -> None:
        self.updates += 1

    def record_sweep(self, evicted: int) -> None:
        self.sweeps += 1
        self.evictions += evicted

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            hits=self.hits,
            misses=self.misses,
            inserts=self.inserts,
            updates=self.updates,
            evictions=self.evictions,
            sweeps=self.sweeps,
            hit_ratio=_ratio(self.hits, self.hits + self.misses),
        )
