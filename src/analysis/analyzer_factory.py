# src/analysis/analyzer_factory.py - v1
"""Resolve the configured provider name into a concrete analyzer, once."""

from __future__ import annotations

import logging

from fraudshield.analysis.base_analyzer import BaseAnalyzer
from fraudshield.config.settings import Settings
from fraudshield.llm.client_factory import UnsupportedProviderError, create_llm_client

logger = logging.getLogger(__name__)


def create_analyzer(settings: Settings | None = None) -> BaseAnalyzer:
    """Instantiate the analyzer for ``settings.provider``.

    Args:
        settings: Application settings. Defaults to the mock analyzer.

    Returns:
        MockAnalyzer for ``mock``, LLMAnalyzer for ``google``/``gemini``/``openai``.

    Raises:
        UnsupportedProviderError: If the provider name is unknown.
    """
    if settings is None:
        from fraudshield.analysis.mock_analyzer import MockAnalyzer
        return MockAnalyzer()

    provider = settings.resolved_provider

    if provider == "mock":
        from fraudshield.analysis.mock_analyzer import MockAnalyzer
        logger.info("Using mock analyzer (no network calls)")
        return MockAnalyzer(
            scam_score=settings.mock_scam_score,
            suspicious_score=settings.mock_suspicious_score,
            safe_score=settings.mock_safe_score,
        )

    if provider in ("google", "openai"):
        from fraudshield.analysis.llm_analyzer import LLMAnalyzer
        client = create_llm_client(provider, settings=settings)
        logger.info("Using %s analyzer (model=%s)", provider, client.model)
        return LLMAnalyzer(
            client,
            preview_chars=settings.preview_chars,
            timeout_s=settings.provider_timeout_s,
            max_tokens=settings.max_reply_tokens,
            temperature=settings.temperature,
        )

    raise UnsupportedProviderError(f"Unknown provider: {provider!r}")
