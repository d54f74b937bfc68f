import pytest

from aged_cache.core.clock import ManualClock


@pytest.fixture
def clock():
    return ManualClock(start=1_000.0)
