# src/cache/base_cache_store.py - v1
"""Abstract cache store interface.

The store is process-wide shared state. ``get`` never performs I/O; the
durable side (if any) is read once by ``load`` and rewritten wholesale by
``put`` and ``clear``. Storage failures are logged by implementations and
degrade to cache-miss behaviour instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fraudshield.cache.models import CacheStats
from fraudshield.core.models import Verdict


class BaseCacheStore(ABC):
    """Unified interface for response cache backends."""

    @abstractmethod
    async def load(self) -> int:
        """Populate memory from durable storage. Returns entry count."""

    @abstractmethod
    async def get(self, key: str) -> Verdict | None:
        """Retrieve a cached verdict by key."""

    @abstractmethod
    async def put(self, key: str, verdict: Verdict) -> None:
        """Insert or overwrite an entry, then persist."""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry and persist the empty cache."""

    @abstractmethod
    def size(self) -> int:
        """Number of entries currently held in memory."""

    @abstractmethod
    def stats(self) -> CacheStats:
        """Cache snapshot for monitoring endpoints."""
