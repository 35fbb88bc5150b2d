# src/analysis/llm_analyzer.py - v1
"""Analyzer backed by a remote LLM (PROVIDER=google|openai).

Sends a bounded prompt (content truncated to ``preview_chars``), makes a
single call bounded by ``timeout_s`` and parses the reply text into a
Verdict. No retries here; every failure is folded into an ``error``
verdict carrying its FailureKind.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging

from fraudshield.analysis.base_analyzer import BaseAnalyzer
from fraudshield.analysis.failures import FailureKind, error_verdict
from fraudshield.analysis.reply_parser import ReplyParseError, parse_verdict_reply
from fraudshield.core.models import Verdict
from fraudshield.llm.base_client import BaseLLMClient
from fraudshield.llm.errors import (
    BackendHTTPError,
    LLMError,
    MissingCredentialError,
)
from fraudshield.llm.models import Message

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are FraudShield AI, an expert in detecting scams, phishing and fake news. "
    "Respond with a single JSON object only."
)

_PROMPT_TEMPLATE = (
    'Analyze this for scams/phishing/fake-news: "{preview}".{url_line}\n'
    "Score risk from 0 (completely safe) to 100 (certain scam). "
    'Respond JSON only: {{"verdict":"scam"|"safe"|"suspicious","score":0-100,'
    '"reason":"brief explanation","category":"{scan_type}",'
    '"suggestedSources":["optional reference URLs"]}}'
)


def truncate_preview(content: str, limit: int) -> str:
    """Cut content to ``limit`` characters, marking the cut with '...'."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def build_prompt(
    scan_type: str, content: str, url: str | None = None, preview_chars: int = 500
) -> str:
    """Render the user prompt for one submission."""
    url_line = ""
    if url and url != content:
        url_line = f"\nURL: {truncate_preview(url, preview_chars)}"
    return _PROMPT_TEMPLATE.format(
        preview=truncate_preview(content, preview_chars),
        url_line=url_line,
        scan_type=scan_type,
    )


class LLMAnalyzer(BaseAnalyzer):
    """Classify content through a BaseLLMClient."""

    def __init__(
        self,
        client: BaseLLMClient,
        preview_chars: int = 500,
        timeout_s: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.2,
    ) -> None:
        self._client = client
        self._preview_chars = preview_chars
        self._timeout_s = timeout_s
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def name(self) -> str:
        return self._client.provider_name

    async def analyze(
        self, scan_type: str, content: str, url: str | None = None
    ) -> Verdict:
        prompt = build_prompt(scan_type, content, url, self._preview_chars)
        prompt_hash = hashlib.sha256(prompt.encode()).hexdigest()[:16]
        logger.debug(
            "Calling %s (%s), prompt_hash=%s",
            self.name, self._client.model, prompt_hash,
        )

        try:
            response = await asyncio.wait_for(
                self._client.complete(
                    messages=[Message(role="user", content=prompt)],
                    system=SYSTEM_PROMPT,
                    max_tokens=self._max_tokens,
                    temperature=self._temperature,
                ),
                timeout=self._timeout_s,
            )
        except MissingCredentialError as e:
            logger.warning("%s analysis skipped: %s", self.name, e)
            return error_verdict(FailureKind.MISSING_CREDENTIAL, str(e), "configuration")
        except BackendHTTPError as e:
            return error_verdict(FailureKind.BACKEND_HTTP_ERROR, str(e), scan_type)
        except asyncio.TimeoutError:
            logger.warning("%s call timed out after %.1fs", self.name, self._timeout_s)
            return error_verdict(
                FailureKind.NETWORK_OR_TIMEOUT,
                f"{self.name} did not answer within {self._timeout_s:g}s",
                scan_type,
            )
        except LLMError as e:
            logger.warning("%s provider error: %s", self.name, e)
            return error_verdict(FailureKind.NETWORK_OR_TIMEOUT, str(e), scan_type)
        except Exception as e:  # noqa: BLE001
            logger.exception("%s provider raised unexpectedly", self.name)
            return error_verdict(
                FailureKind.NETWORK_OR_TIMEOUT, f"{self.name} provider error: {e}", scan_type
            )

        text = response.content.strip()
        if not text:
            logger.error("Empty reply from %s", self.name)
            return error_verdict(FailureKind.EMPTY_REPLY, "Empty API response", scan_type)

        try:
            verdict = parse_verdict_reply(text)
        except ReplyParseError as e:
            logger.error("Unusable reply from %s (%s): %s", self.name, e.kind.value, text[:200])
            return error_verdict(e.kind, str(e), scan_type)

        logger.info(
            "%s verdict=%s score=%d latency_ms=%d tokens_in=%d tokens_out=%d",
            self.name, verdict.verdict, verdict.score, response.latency_ms,
            response.input_tokens, response.output_tokens,
        )
        return verdict
