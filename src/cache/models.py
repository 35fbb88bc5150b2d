# src/cache/models.py - v1
"""Cache domain models."""

from __future__ import annotations

from pydantic import BaseModel


class CacheStats(BaseModel):
    """Snapshot of the response cache."""

    backend: str
    entries: int
    path: str | None = None
    loaded: bool = False
