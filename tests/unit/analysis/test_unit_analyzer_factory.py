# tests/unit/analysis/test_unit_analyzer_factory.py - v1
"""Tests for analysis/analyzer_factory.py."""

from __future__ import annotations

import pytest

from fraudshield.analysis.analyzer_factory import create_analyzer
from fraudshield.analysis.llm_analyzer import LLMAnalyzer
from fraudshield.analysis.mock_analyzer import MockAnalyzer
from fraudshield.llm.client_factory import UnsupportedProviderError


class TestCreateAnalyzer:
    def test_default_mock(self):
        assert isinstance(create_analyzer(), MockAnalyzer)

    @pytest.mark.asyncio
    async def test_mock_uses_configured_scores(self, settings):
        s = settings.model_copy(update={"mock_scam_score": 77})
        analyzer = create_analyzer(s)
        assert isinstance(analyzer, MockAnalyzer)
        assert (await analyzer.analyze("scam", "lottery")).score == 77

    @pytest.mark.parametrize("provider,expected", [
        ("google", "google"),
        ("gemini", "google"),
        ("openai", "openai"),
    ])
    def test_remote_providers(self, settings, provider, expected):
        s = settings.model_copy(update={"provider": provider})
        analyzer = create_analyzer(s)
        assert isinstance(analyzer, LLMAnalyzer)
        assert analyzer.name == expected

    def test_unknown_provider(self, settings):
        s = settings.model_copy(update={"provider": "anthropic"})
        with pytest.raises(UnsupportedProviderError):
            create_analyzer(s)
