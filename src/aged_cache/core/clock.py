"""
Time sources for the cache.
Why: expiry must be testable without sleeping; the cache only ever asks "what time is it".
"""

import time
from datetime import timedelta
from typing import Protocol, Union

Seconds = Union[timedelta, int, float]


def to_seconds(delta: Seconds) -> float:
    if isinstance(delta, timedelta):
        return delta.total_seconds()
    return float(delta)


class Clock(Protocol):
    def now(self) -> float:
        ...


class SystemClock:
    def now(self) -> float:
        return time.time()


class ManualClock:
    """Clock that only moves when told to. Readings are seconds, like time.time()."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, delta: Seconds) -> float:
        step = to_seconds(delta)
        if step < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += step
        return self._now

    def set(self, instant: float) -> None:
        self._now = float(instant)
