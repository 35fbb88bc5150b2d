# src/analysis/reply_parser.py - v1
"""Turn free-text LLM replies into a Verdict.

Backends are asked for bare JSON but routinely wrap it in prose or code
fences, and Gemini in particular sometimes emits JavaScript-style objects
with unquoted keys (``{verdict:"safe",score:10}``). The pipeline is:

    1. strip leading/trailing code fences
    2. take the greedy first-``{`` .. last-``}`` span   (else NoJsonFound)
    3. quote bare keys, drop trailing commas
    4. json.loads                                        (else MalformedJson)
    5. coerce into a Verdict                             (else MalformedJson)

Key quoting is a regex heuristic, not a JSON5 parser. It only rewrites
identifiers that follow ``{`` or ``,``, so ``"see http://x"`` survives,
but a string value containing ``, word:`` is still rewritten and will
then fail to parse.
"""

from __future__ import annotations

import json
import re
from typing import Any

from fraudshield.analysis.failures import FailureKind
from fraudshield.core.models import RISK_LABELS, Verdict, coerce_score

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\s*```$")
_JSON_SPAN_RE = re.compile(r"\{[\s\S]*\}")
_BARE_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_]\w*)\s*:")
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


class ReplyParseError(ValueError):
    """Reply text could not be turned into a Verdict."""

    def __init__(self, kind: FailureKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


def strip_code_fences(text: str) -> str:
    """Remove a leading ```/```json marker and a trailing ``` marker."""
    text = text.strip()
    text = _FENCE_OPEN_RE.sub("", text)
    text = _FENCE_CLOSE_RE.sub("", text)
    return text.strip()


def extract_json_span(text: str) -> str:
    """Return the first-brace to last-brace span of ``text``.

    Raises:
        ReplyParseError: NoJsonFound when there is no ``{...}`` span.
    """
    match = _JSON_SPAN_RE.search(text)
    if not match:
        raise ReplyParseError(FailureKind.NO_JSON_FOUND, "No JSON found in provider reply")
    return match.group(0)


def repair_json(text: str) -> str:
    """Quote bare object keys and drop trailing commas."""
    text = _BARE_KEY_RE.sub(r'\1"\2":', text)
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def parse_json_object(text: str) -> dict[str, Any]:
    """Run steps 1-4 of the pipeline and return the decoded object."""
    span = extract_json_span(strip_code_fences(text))
    try:
        data = json.loads(repair_json(span))
    except json.JSONDecodeError as e:
        raise ReplyParseError(
            FailureKind.MALFORMED_JSON, f"Invalid JSON in provider reply ({e.msg})"
        ) from e
    if not isinstance(data, dict):
        raise ReplyParseError(FailureKind.MALFORMED_JSON, "Provider reply is not a JSON object")
    return data


def coerce_verdict(data: dict[str, Any]) -> Verdict:
    """Map a decoded reply object onto a Verdict.

    Only the label is mandatory. Absent reason/category/sources stay
    ``None``; filling them is the orchestrator's job.
    """
    label = str(data.get("verdict") or "").strip().lower()
    if label not in RISK_LABELS:
        raise ReplyParseError(
            FailureKind.MALFORMED_JSON,
            f"Unrecognized verdict {data.get('verdict')!r} in provider reply",
        )

    sources = data.get("suggestedSources", data.get("suggested_sources"))
    if isinstance(sources, list):
        sources = [str(s) for s in sources if s]
    else:
        sources = None

    reason = data.get("reason")
    category = data.get("category")
    return Verdict(
        verdict=label,  # type: ignore[arg-type]
        score=coerce_score(data.get("score")),
        reason=str(reason) if reason is not None else None,
        category=str(category) if category else None,
        suggested_sources=sources,
    )


def parse_verdict_reply(text: str) -> Verdict:
    """Full pipeline: raw backend text -> Verdict.

    Raises:
        ReplyParseError: With kind NoJsonFound or MalformedJson.
    """
    return coerce_verdict(parse_json_object(text))
