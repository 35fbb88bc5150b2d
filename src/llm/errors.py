# src/llm/errors.py - v1
"""Provider-neutral LLM client errors.

Adapters translate SDK exceptions into these so callers never depend on
a specific SDK's exception hierarchy.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base class for LLM client failures."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(message)


class MissingCredentialError(LLMError):
    """The backend needs an API key that is not configured."""

    def __init__(self, provider: str, setting: str) -> None:
        self.setting = setting
        super().__init__(provider, f"{setting} is not configured on the server.")


class BackendHTTPError(LLMError):
    """The backend answered with a non-2xx status."""

    def __init__(self, provider: str, status_code: int | None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            provider, f"{provider} API request failed with status {status_code}"
        )


class BackendUnavailableError(LLMError):
    """Connection failure or timeout before a status was received."""
