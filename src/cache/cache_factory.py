# src/cache/cache_factory.py - v3
"""Factory for cache store instantiation."""

from __future__ import annotations

from fraudshield.cache.base_cache_store import BaseCacheStore
from fraudshield.config.settings import Settings


def create_cache_store(settings: Settings | None = None) -> BaseCacheStore:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to JSON backend.

    Returns:
        Configured BaseCacheStore implementation.
    """
    backend = "json" if settings is None else settings.cache_backend

    if backend == "json":
        from fraudshield.cache.json_store import JsonCacheStore
        cache_path = "data/cache.json" if settings is None else settings.cache_path
        return JsonCacheStore(cache_path=cache_path)

    if backend == "memory":
        from fraudshield.cache.memory_store import MemoryCacheStore
        return MemoryCacheStore()

    raise ValueError(f"Unsupported cache backend: {backend!r}")
