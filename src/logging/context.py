# src/logging/context.py - v1
"""Contextual logging support: attach scan_id, scan_type, provider to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per scan request.
_scan_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_id", default=None
)
_scan_type: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_type", default=None
)
_provider: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "provider", default=None
)


@dataclass(frozen=True)
class LogContext:
    """Immutable snapshot of current logging context."""

    scan_id: str | None = None
    scan_type: str | None = None
    provider: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        scan_id=_scan_id.get(),
        scan_type=_scan_type.get(),
        provider=_provider.get(),
    )


def set_scan_context(scan_id: str, scan_type: str) -> None:
    """Set request-level context (called once per scan)."""
    _scan_id.set(scan_id)
    _scan_type.set(scan_type)


def set_provider_context(provider: str) -> None:
    """Set the analysis provider handling the current scan."""
    _provider.set(provider)


def clear_context() -> None:
    """Reset all context variables."""
    _scan_id.set(None)
    _scan_type.set(None)
    _provider.set(None)
