# tests/conftest.py - v1
"""Shared test fixtures for all unit tests.

Provides settings pointed at temp files, in-memory caches, a counting
analyzer and a mock LLM client. No network access: the remote SDKs are
never called.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from fraudshield.analysis.base_analyzer import BaseAnalyzer
from fraudshield.cache.memory_store import MemoryCacheStore
from fraudshield.config.settings import Settings
from fraudshield.core.models import Verdict
from fraudshield.llm.models import LLMResponse
from fraudshield.logging.context import clear_context
from fraudshield.storage.history import HistoryLedger


class CountingAnalyzer(BaseAnalyzer):
    """Analyzer returning queued verdicts and counting calls."""

    def __init__(self, *verdicts: Verdict) -> None:
        self._verdicts = list(verdicts) or [
            Verdict(verdict="safe", score=5, reason="looks fine", category="scam")
        ]
        self.calls: list[tuple[str, str, str | None]] = []

    @property
    def name(self) -> str:
        return "counting"

    async def analyze(self, scan_type, content, url=None) -> Verdict:
        self.calls.append((scan_type, content, url))
        index = min(len(self.calls) - 1, len(self._verdicts) - 1)
        return self._verdicts[index]

    @property
    def call_count(self) -> int:
        return len(self.calls)


# === FIXTURES: Settings / stores ===


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with mock provider and temp data files."""
    return Settings(
        _env_file=None,
        provider="mock",
        cache_path=tmp_path / "data" / "cache.json",
        history_path=tmp_path / "data" / "history.json",
    )


@pytest.fixture
def memory_cache() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def history(tmp_path: Path) -> HistoryLedger:
    return HistoryLedger(tmp_path / "history.json")


@pytest.fixture
def counting_analyzer() -> CountingAnalyzer:
    return CountingAnalyzer()


@pytest.fixture
def scam_verdict() -> Verdict:
    return Verdict(
        verdict="scam",
        score=95,
        reason="Prize bait with urgency",
        category="scam",
        suggested_sources=["https://consumer.ftc.gov"],
    )


@pytest.fixture
def error_verdict() -> Verdict:
    return Verdict(
        verdict="error",
        score=0,
        reason="NetworkOrTimeout: connection reset",
        category="scam",
        suggested_sources=[],
    )


# === FIXTURES: Mock LLM ===


@pytest.fixture
def mock_llm_response() -> LLMResponse:
    """Well-formed JSON reply."""
    return LLMResponse(
        content='{"verdict": "suspicious", "score": 55, "reason": "Shortened link", "category": "url"}',
        input_tokens=80,
        output_tokens=30,
        model="gemini-2.0-flash",
        provider="google",
        latency_ms=420,
    )


@pytest.fixture
def mock_llm_client(mock_llm_response: LLMResponse) -> AsyncMock:
    """Mock BaseLLMClient with default response."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value=mock_llm_response)
    client.provider_name = "google"
    client.model = "gemini-2.0-flash"
    return client


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture
def make_analyzer():
    """Factory for CountingAnalyzer instances with queued verdicts."""
    return CountingAnalyzer
