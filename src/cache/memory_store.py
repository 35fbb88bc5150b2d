# src/cache/memory_store.py - v1
"""In-memory cache store (CACHE_BACKEND=memory).

Also the base of the JSON store: mutations go through ``_persist`` under a
single lock, so subclasses only add the durable side.
"""

from __future__ import annotations

import asyncio
import logging

from fraudshield.cache.base_cache_store import BaseCacheStore
from fraudshield.cache.models import CacheStats
from fraudshield.core.models import Verdict

logger = logging.getLogger(__name__)


class MemoryCacheStore(BaseCacheStore):
    """Process-local cache store with no durable backing."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._entries: dict[str, Verdict] = {}
        self._lock = asyncio.Lock()
        self._loaded = False

    async def load(self) -> int:
        self._loaded = True
        return len(self._entries)

    async def get(self, key: str) -> Verdict | None:
        return self._entries.get(key)

    async def put(self, key: str, verdict: Verdict) -> None:
        """Insert/overwrite an entry and persist the whole map."""
        async with self._lock:
            self._entries[key] = verdict
            self._persist()

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
            self._persist()
        logger.info("Response cache cleared")

    def size(self) -> int:
        return len(self._entries)

    def stats(self) -> CacheStats:
        return CacheStats(
            backend=self.backend_name,
            entries=len(self._entries),
            loaded=self._loaded,
        )

    def _persist(self) -> None:
        """Write the current map to durable storage. Caller holds the lock."""
