# src/api/facade.py - v2
"""Public service facade: one object wiring cache, analyzer, orchestrator and ledger.

Usage:
    from fraudshield.api.facade import build_service
    service = build_service(settings)
    await service.startup()
    record = await service.scan("scam", text="You won a prize!")

Used by both the HTTP app and the CLI.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fraudshield.cache.models import CacheStats
from fraudshield.config.settings import Settings
from fraudshield.core.models import ScanRecord
from fraudshield.logging.context import clear_context
from fraudshield.scan.orchestrator import ScanOrchestrator

if TYPE_CHECKING:
    from fraudshield.analysis.base_analyzer import BaseAnalyzer
    from fraudshield.cache.base_cache_store import BaseCacheStore
    from fraudshield.storage.history import HistoryLedger

logger = logging.getLogger(__name__)


class ScanService:
    """Scan submissions and record them in the history ledger."""

    def __init__(
        self,
        settings: Settings,
        orchestrator: ScanOrchestrator,
        history: HistoryLedger,
    ) -> None:
        self.settings = settings
        self.orchestrator = orchestrator
        self.history = history
        self._started = False

    @property
    def provider_name(self) -> str:
        return self.orchestrator.analyzer.name

    async def startup(self) -> None:
        """Load the response cache once. Safe to call repeatedly."""
        if self._started:
            return
        count = await self.orchestrator.cache_store.load()
        self._started = True
        logger.info(
            "FraudShield ready: provider=%s, cached_responses=%d",
            self.provider_name, count,
        )

    async def scan(
        self, scan_type: str, text: str | None = None, url: str | None = None
    ) -> ScanRecord:
        """Run one scan and append the record to history.

        Raises:
            EmptyContentError: If neither text nor url has content.
        """
        try:
            record = await self.orchestrator.handle(scan_type, text, url)
            await self.history.append(record)
            return record
        finally:
            clear_context()

    def cache_stats(self) -> CacheStats:
        return self.orchestrator.cache_store.stats()

    async def clear_cache(self) -> None:
        await self.orchestrator.cache_store.clear()


def build_service(
    settings: Settings | None = None,
    cache_store: BaseCacheStore | None = None,
    analyzer: BaseAnalyzer | None = None,
    history: HistoryLedger | None = None,
) -> ScanService:
    """Assemble a ScanService from settings, with optional injected parts.

    Args:
        settings: Global settings. Loaded from .env if None.
        cache_store: Response cache. Built from settings if None.
        analyzer: Analyzer. Resolved from ``settings.provider`` if None.
        history: History ledger. Opened at ``settings.history_path`` if None.

    Raises:
        UnsupportedProviderError: If the configured provider is unknown.
    """
    settings = settings or Settings()

    if cache_store is None:
        from fraudshield.cache.cache_factory import create_cache_store
        cache_store = create_cache_store(settings)

    if analyzer is None:
        from fraudshield.analysis.analyzer_factory import create_analyzer
        analyzer = create_analyzer(settings)

    if history is None:
        from fraudshield.storage.history import HistoryLedger
        history = HistoryLedger(settings.history_path)

    orchestrator = ScanOrchestrator(
        cache_store=cache_store,
        analyzer=analyzer,
        cache_enabled=settings.cache_enabled,
    )
    return ScanService(settings=settings, orchestrator=orchestrator, history=history)
