# src/analysis/failures.py - v1
"""Failure taxonomy for analyzers.

Analyzers never raise for backend trouble; every failure becomes an
``error`` verdict with score 0 so the scan still yields a record.
"""

from __future__ import annotations

from enum import Enum

from fraudshield.core.models import Verdict


class FailureKind(str, Enum):
    """Why an analysis could not produce a risk verdict."""

    MISSING_CREDENTIAL = "MissingCredential"
    BACKEND_HTTP_ERROR = "BackendHttpError"
    EMPTY_REPLY = "EmptyReply"
    NO_JSON_FOUND = "NoJsonFound"
    MALFORMED_JSON = "MalformedJson"
    NETWORK_OR_TIMEOUT = "NetworkOrTimeout"


def error_verdict(kind: FailureKind, reason: str, category: str) -> Verdict:
    """Build the ``error`` verdict reported for a failed analysis."""
    return Verdict(
        verdict="error",
        score=0,
        reason=f"{kind.value}: {reason}",
        category=category,
        suggested_sources=[],
    )
