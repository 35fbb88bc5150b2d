# src/core/models.py - v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
Field aliases (``suggestedSources``, ``userInput``) are the names used on
disk and over HTTP, so dumps meant for either go through ``by_alias=True``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ScanType = Literal["scam", "url", "news"]
VerdictLabel = Literal["safe", "suspicious", "scam", "error"]

SCAN_TYPES: tuple[str, ...] = ("scam", "url", "news")
RISK_LABELS: tuple[str, ...] = ("safe", "suspicious", "scam")


def coerce_score(value: Any) -> int:
    """Coerce a raw score into an int in 0..100 (0 when unparseable)."""
    if isinstance(value, bool) or value is None:
        return 0
    try:
        score = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, min(100, score))


# === VERDICT ===


class Verdict(BaseModel):
    """Normalized output of one analysis. 0 = safe, 100 = maximum risk.

    ``reason``, ``category`` and ``suggested_sources`` stay ``None`` when
    the backend omitted them; the orchestrator is the only place that
    fills defaults.
    """

    model_config = ConfigDict(populate_by_name=True)

    verdict: VerdictLabel
    score: int = 0
    reason: str | None = None
    category: str | None = None
    suggested_sources: list[str] | None = Field(default=None, alias="suggestedSources")

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, v: Any) -> int:
        return coerce_score(v)

    @property
    def is_error(self) -> bool:
        return self.verdict == "error"


# === SCAN RECORD ===


class ScanRecord(BaseModel):
    """A finished scan, handed to the history ledger and returned to clients."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    timestamp: str
    user_input: str = Field(alias="userInput")
    type: ScanType
    score: int = 0
    verdict: str = "unknown"
    reason: str = "No reason provided."
    category: str = ""
    suggested_sources: list[str] = Field(default_factory=list, alias="suggestedSources")
    cached: bool = False

    def to_json_dict(self) -> dict[str, Any]:
        """Wire/disk representation (camelCase aliases)."""
        return self.model_dump(by_alias=True)
