# src/llm/adapters/openai_adapter.py - v2
"""OpenAI Chat Completions adapter implementing BaseLLMClient.

Uses the official openai SDK with its built-in retries turned off: one
request per call, bounded by ``timeout_s``.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fraudshield.llm.base_client import BaseLLMClient
from fraudshield.llm.errors import (
    BackendHTTPError,
    BackendUnavailableError,
    MissingCredentialError,
)
from fraudshield.llm.models import LLMResponse, Message

logger = logging.getLogger(__name__)


class OpenAIAdapter(BaseLLMClient):
    """OpenAI GPT adapter."""

    def __init__(
        self,
        model: str = "gpt-3.5-turbo",
        api_key: str = "",
        timeout_s: float = 30.0,
        **kwargs: Any,
    ):
        self._model = model
        self._api_key = api_key
        self._timeout_s = timeout_s

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 500,
        temperature: float = 0.2,
    ) -> LLMResponse:
        if not self._api_key:
            raise MissingCredentialError("openai", "OPENAI_API_KEY")

        import openai

        client = openai.AsyncOpenAI(
            api_key=self._api_key, timeout=self._timeout_s, max_retries=0,
        )
        oai_messages: list[dict[str, Any]] = []
        if system:
            oai_messages.append({"role": "system", "content": system})
        for m in messages:
            oai_messages.append({"role": m.role, "content": m.content})

        t0 = time.monotonic()
        try:
            resp = await client.chat.completions.create(
                model=self._model,
                messages=oai_messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            body = str(e.body or e.message or "")
            logger.error("OpenAI API error: %s - %s", e.status_code, body[:200])
            raise BackendHTTPError("openai", e.status_code, body) from e
        except openai.APIConnectionError as e:
            raise BackendUnavailableError("openai", f"OpenAI unreachable: {e}") from e
        latency = int((time.monotonic() - t0) * 1000)

        content = ""
        if resp.choices:
            content = resp.choices[0].message.content or ""
        usage = resp.usage
        return LLMResponse(
            content=content,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self._model,
            provider="openai",
            latency_ms=latency,
        )

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model
