# src/cache/fingerprint.py - v1
"""Content fingerprinting for the response cache.

Keys are SHA-256 over ``"{type}:{normalized}"`` where normalization is
lowercase + trim only. No fuzzy matching: two submissions share a key
iff their normalized bytes and analysis type are identical. Keys must
stay stable across restarts so persisted entries remain addressable.
"""

from __future__ import annotations

import hashlib


def normalize_content(content: str) -> str:
    """Normalize submitted content: trim surrounding whitespace, lowercase."""
    return content.strip().lower()


def compute_cache_key(content: str, analysis_type: str) -> str:
    """Compute the cache key for a submission.

    Args:
        content: Raw submitted text or URL.
        analysis_type: Scan type (scam, url, news).

    Returns:
        64-char hex digest.
    """
    payload = f"{analysis_type}:{normalize_content(content)}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
