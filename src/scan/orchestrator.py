# src/scan/orchestrator.py - v1
"""Scan orchestrator: cache check, analyzer call on miss, record minting.

Per request:

    RECEIVED -> CACHE_CHECK -> CACHE_HIT -> DONE
                            -> CACHE_MISS -> PROVIDER_CALL -> SUCCESS -> CACHE_STORE -> DONE
                                                           -> FAILURE -> DONE

Every validated submission yields exactly one ScanRecord, including cache
hits (fresh id and timestamp, reused verdict) and failed analyses
(``error`` verdict). Error verdicts are never written to the cache, so a
transient backend failure is retried on the next identical submission.

The orchestrator does not touch the history ledger; its caller appends
the returned record.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from fraudshield.cache.fingerprint import compute_cache_key
from fraudshield.core.models import SCAN_TYPES, ScanRecord, Verdict
from fraudshield.logging.context import set_provider_context, set_scan_context

if TYPE_CHECKING:
    from fraudshield.analysis.base_analyzer import BaseAnalyzer
    from fraudshield.cache.base_cache_store import BaseCacheStore

logger = logging.getLogger(__name__)

DEFAULT_REASON = "No reason provided."
DEFAULT_VERDICT = "unknown"


class EmptyContentError(ValueError):
    """Submission has nothing to scan once trimmed."""

    def __init__(self, message: str = "Missing content to scan.") -> None:
        super().__init__(message)


class ScanState(str, Enum):
    RECEIVED = "received"
    CACHE_CHECK = "cache_check"
    CACHE_HIT = "cache_hit"
    CACHE_MISS = "cache_miss"
    PROVIDER_CALL = "provider_call"
    SUCCESS = "success"
    FAILURE = "failure"
    CACHE_STORE = "cache_store"
    DONE = "done"


class ScanOrchestrator:
    """Sequence one scan request under a single result contract.

    Args:
        cache_store: Shared response cache. Injected so tests can pass a
            memory-only store.
        analyzer: Analyzer resolved once at startup.
        cache_enabled: When False, every request goes to the analyzer and
            nothing is stored.
    """

    def __init__(
        self,
        cache_store: BaseCacheStore,
        analyzer: BaseAnalyzer,
        cache_enabled: bool = True,
    ) -> None:
        self._cache = cache_store
        self._analyzer = analyzer
        self._cache_enabled = cache_enabled

    @property
    def cache_store(self) -> BaseCacheStore:
        return self._cache

    @property
    def analyzer(self) -> BaseAnalyzer:
        return self._analyzer

    async def handle(
        self, scan_type: str, content: str | None, url: str | None = None
    ) -> ScanRecord:
        """Scan one submission and return the finished record.

        Args:
            scan_type: One of scam, url, news.
            content: Submitted text; the url is used when this is empty.
            url: Optional URL accompanying the submission.

        Raises:
            EmptyContentError: Nothing to scan after trimming. Raised before
                any cache or analyzer interaction.
            ValueError: Unknown scan type.
        """
        if scan_type not in SCAN_TYPES:
            raise ValueError(
                f"Unknown scan type: {scan_type!r}. Expected one of {', '.join(SCAN_TYPES)}"
            )
        user_input = content if content and content.strip() else (url or "")
        if not user_input.strip():
            raise EmptyContentError()

        scan_id = str(uuid.uuid4())
        set_scan_context(scan_id, scan_type)
        set_provider_context(self._analyzer.name)
        self._transition(ScanState.RECEIVED)

        key = compute_cache_key(user_input, scan_type)
        verdict: Verdict | None = None
        if self._cache_enabled:
            self._transition(ScanState.CACHE_CHECK)
            verdict = await self._cache.get(key)

        if verdict is not None:
            self._transition(ScanState.CACHE_HIT)
            logger.info("Cache hit - no provider call needed (key=%s)", key[:12])
            record = self._build_record(scan_id, scan_type, user_input, verdict, cached=True)
            self._transition(ScanState.DONE)
            return record

        self._transition(ScanState.CACHE_MISS)
        self._transition(ScanState.PROVIDER_CALL)
        verdict = await self._analyzer.analyze(scan_type, user_input, url)

        if verdict.is_error:
            self._transition(ScanState.FAILURE)
            logger.warning("Analysis failed, result not cached: %s", verdict.reason)
        else:
            self._transition(ScanState.SUCCESS)
            if self._cache_enabled:
                self._transition(ScanState.CACHE_STORE)
                await self._cache.put(key, verdict)
                logger.info("Response cached for future use (key=%s)", key[:12])

        record = self._build_record(scan_id, scan_type, user_input, verdict, cached=False)
        self._transition(ScanState.DONE)
        return record

    @staticmethod
    def _build_record(
        scan_id: str,
        scan_type: str,
        user_input: str,
        verdict: Verdict,
        cached: bool,
    ) -> ScanRecord:
        """Wrap a verdict into a record, filling defaults for absent fields."""
        return ScanRecord(
            id=scan_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            user_input=user_input,
            type=scan_type,  # type: ignore[arg-type]
            score=verdict.score,
            verdict=verdict.verdict or DEFAULT_VERDICT,
            reason=verdict.reason or DEFAULT_REASON,
            category=verdict.category or scan_type,
            suggested_sources=list(verdict.suggested_sources or []),
            cached=cached,
        )

    @staticmethod
    def _transition(state: ScanState) -> None:
        logger.debug("scan state -> %s", state.value)
