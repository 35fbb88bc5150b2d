# src/cache/json_store.py - v2
"""JSON file-based cache store (default CACHE_BACKEND=json).

The whole cache lives in a single JSON object ``{key_hex: verdict}``,
rewritten atomically on every mutation. Read and write failures are
logged, never raised: a broken file means an empty cache, a failed write
leaves the in-memory map intact.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from fraudshield.cache.memory_store import MemoryCacheStore
from fraudshield.cache.models import CacheStats
from fraudshield.core.models import Verdict
from fraudshield.storage.local_writer import read_json, write_json_atomic

logger = logging.getLogger(__name__)


class JsonCacheStore(MemoryCacheStore):
    """Cache store persisted to one JSON file."""

    backend_name = "json"

    def __init__(self, cache_path: Path | str) -> None:
        super().__init__()
        self._path = Path(cache_path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> int:
        """Load the cache file into memory. Missing or unreadable = empty."""
        async with self._lock:
            self._entries.clear()
            self._entries.update(self._read_file())
            self._loaded = True
            count = len(self._entries)
        logger.info("Loaded %d cached responses from %s", count, self._path)
        return count

    def stats(self) -> CacheStats:
        return CacheStats(
            backend=self.backend_name,
            entries=len(self._entries),
            path=str(self._path),
            loaded=self._loaded,
        )

    def _read_file(self) -> dict[str, Verdict]:
        try:
            data = read_json(self._path, default={})
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load cache %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring cache %s: expected a JSON object, got %s",
                self._path, type(data).__name__,
            )
            return {}

        entries: dict[str, Verdict] = {}
        for key, raw in data.items():
            try:
                entries[key] = Verdict.model_validate(raw)
            except ValidationError as e:
                logger.warning("Skipping invalid cache entry %s: %s", key, e)
        return entries

    def _persist(self) -> None:
        payload = {
            key: verdict.model_dump(by_alias=True, exclude_none=True)
            for key, verdict in self._entries.items()
        }
        try:
            write_json_atomic(self._path, payload)
        except OSError as e:
            logger.error("Failed to save cache %s: %s", self._path, e)
