"""
Pydantic models for data the cache hands out.
Why: a stable, validated shape for stats consumers (dashboards, tests).
"""

from pydantic import BaseModel, Field


class StatsSnapshot(BaseModel):
    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    inserts: int = Field(default=0, ge=0)
    updates: int = Field(default=0, ge=0)
    evictions: int = Field(default=0, ge=0)
    sweeps: int = Field(default=0, ge=0)
    hit_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
