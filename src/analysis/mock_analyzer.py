# src/analysis/mock_analyzer.py - v1
"""Offline keyword-sniffing analyzer (PROVIDER=mock).

Deterministic and network-free; used for local runs and tests, and as the
default when no real backend is configured.
"""

from __future__ import annotations

import re

from fraudshield.analysis.base_analyzer import BaseAnalyzer
from fraudshield.core.models import Verdict

SCAM_KEYWORDS: tuple[str, ...] = (
    "prize",
    "won",
    "winner",
    "lottery",
    "click",
    "otp",
    "bank",
    "urgent",
    "password",
    "verify your account",
    "gift card",
    "wire transfer",
)

_URL_RE = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)


class MockAnalyzer(BaseAnalyzer):
    """Classify by keyword presence with fixed scores."""

    def __init__(
        self,
        scam_score: int = 90,
        suspicious_score: int = 60,
        safe_score: int = 10,
    ) -> None:
        self._scam_score = scam_score
        self._suspicious_score = suspicious_score
        self._safe_score = safe_score

    @property
    def name(self) -> str:
        return "mock"

    async def analyze(
        self, scan_type: str, content: str, url: str | None = None
    ) -> Verdict:
        lowered = (content or url or "").lower()

        hits = [kw for kw in SCAM_KEYWORDS if kw in lowered]
        if hits:
            return Verdict(
                verdict="scam",
                score=self._scam_score,
                reason="Mocked: contains common scam keywords ("
                + ", ".join(hits) + ")",
                category=scan_type,
                suggested_sources=[],
            )

        if _URL_RE.search(lowered) or lowered.startswith("http"):
            return Verdict(
                verdict="suspicious",
                score=self._suspicious_score,
                reason="Mocked: suspicious URL detected",
                category=scan_type,
                suggested_sources=[],
            )

        return Verdict(
            verdict="safe",
            score=self._safe_score,
            reason="Mocked: no risk indicators found",
            category=scan_type,
            suggested_sources=[],
        )
