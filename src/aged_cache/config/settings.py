"""Configuration settings for the cache.

Values come from ``AGED_CACHE_*`` environment variables. A ``.env`` file in
the working directory is read once, on the first ``get_settings()`` call, not
at import; variables already set in the environment win over it.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CacheSettings:
    # Negative retention is stored as already-expired unless this is set
    reject_negative_retention: bool = field(
        default_factory=lambda: _env_flag("AGED_CACHE_REJECT_NEGATIVE_RETENTION")
    )


@dataclass
class LoggingSettings:
    level: str = field(
        default_factory=lambda: os.getenv("AGED_CACHE_LOG_LEVEL", "INFO").upper()
    )


@dataclass
class Settings:
    cache: CacheSettings = field(default_factory=CacheSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings()
