# src/llm/base_client.py - v2
"""Abstract LLM client interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fraudshield.llm.models import LLMResponse, Message


class BaseLLMClient(ABC):
    """Unified interface for remote LLM providers.

    Implementations issue exactly one request per call (SDK-level retries
    disabled) and raise ``fraudshield.llm.errors.LLMError`` subclasses on
    failure.
    """

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 500,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Text completion."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier (google, openai)."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Model name requests are sent to."""
