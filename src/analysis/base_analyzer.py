# src/analysis/base_analyzer.py - v1
"""Abstract analyzer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fraudshield.core.models import Verdict


class BaseAnalyzer(ABC):
    """Classifies one submission.

    ``analyze`` must not raise for backend failures: it returns an
    ``error`` verdict instead. Analyzers never touch the response cache.
    """

    @abstractmethod
    async def analyze(
        self, scan_type: str, content: str, url: str | None = None
    ) -> Verdict:
        """Classify content for the given scan type."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Analyzer identifier (mock, google, openai)."""
