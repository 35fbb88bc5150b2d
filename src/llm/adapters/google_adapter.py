# src/llm/adapters/google_adapter.py - v2
"""Google Gemini adapter implementing BaseLLMClient.

Uses the google-generativeai SDK. The request timeout is passed through
``request_options``; the SDK's API errors are mapped onto our LLMError
hierarchy by HTTP status.
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


class GoogleAdapter(BaseLLMClient):
    """Google Gemini adapter."""

    def __init__(
        self,
        model: str = "gemini-2.0-flash",
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
            raise MissingCredentialError("google", "GOOGLE_API_KEY")

        import google.generativeai as genai
        from google.api_core import exceptions as gexc

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model, system_instruction=system)

        gen_config: dict[str, Any] = {
            "max_output_tokens": max_tokens,
            "temperature": temperature,
        }

        contents = []
        for m in messages:
            role = "model" if m.role == "assistant" else "user"
            contents.append({"role": role, "parts": [{"text": m.content}]})

        t0 = time.monotonic()
        try:
            resp = await model.generate_content_async(
                contents,
                generation_config=gen_config,
                request_options={"timeout": self._timeout_s},
            )
        except (gexc.DeadlineExceeded, gexc.RetryError) as e:
            raise BackendUnavailableError("google", f"Gemini unreachable: {e}") from e
        except gexc.GoogleAPICallError as e:
            logger.error("Gemini API error: %s - %s", e.code, str(e.message)[:200])
            raise BackendHTTPError("google", _status_code(e), str(e.message)) from e
        latency = int((time.monotonic() - t0) * 1000)

        usage = getattr(resp, "usage_metadata", None)
        return LLMResponse(
            content=_response_text(resp),
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
            model=self._model,
            provider="google",
            latency_ms=latency,
        )

    @property
    def provider_name(self) -> str:
        return "google"

    @property
    def model(self) -> str:
        return self._model


def _status_code(error: Any) -> int | None:
    code = getattr(error, "code", None)
    try:
        return int(code) if code is not None else None
    except (TypeError, ValueError):
        return None


def _response_text(resp: Any) -> str:
    """Extract reply text; ``resp.text`` raises when no candidate has parts."""
    try:
        return resp.text or ""
    except ValueError:
        return ""
