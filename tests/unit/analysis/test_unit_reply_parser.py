# tests/unit/analysis/test_unit_reply_parser.py - v1
"""Tests for analysis/reply_parser.py - fence stripping, repair, coercion."""

from __future__ import annotations

import json

import pytest

from fraudshield.analysis.failures import FailureKind
from fraudshield.analysis.reply_parser import (
    ReplyParseError,
    extract_json_span,
    parse_json_object,
    parse_verdict_reply,
    repair_json,
    strip_code_fences,
)


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestExtractJsonSpan:
    def test_prose_wrapped(self):
        text = 'Sure! Here is my analysis: {"verdict": "safe"} Hope it helps.'
        assert extract_json_span(text) == '{"verdict": "safe"}'

    def test_greedy_span(self):
        assert extract_json_span('x {"a": {"b": 1}} y') == '{"a": {"b": 1}}'

    def test_no_json(self):
        with pytest.raises(ReplyParseError) as exc:
            extract_json_span("I cannot analyze this")
        assert exc.value.kind is FailureKind.NO_JSON_FOUND


class TestRepairJson:
    def test_quotes_bare_keys(self):
        assert repair_json('{verdict:"scam",score:95}') == '{"verdict":"scam","score":95}'

    def test_leaves_quoted_keys(self):
        assert repair_json('{"verdict": "safe"}') == '{"verdict": "safe"}'

    def test_url_in_value_untouched(self):
        text = '{"reason": "see http://example.com"}'
        assert repair_json(text) == text

    def test_drops_trailing_commas(self):
        assert repair_json('{"a": [1, 2,], "b": 3,}') == '{"a": [1, 2], "b": 3}'


class TestParseJsonObject:
    def test_malformed(self):
        with pytest.raises(ReplyParseError) as exc:
            parse_json_object('{"verdict": "scam", "score": }')
        assert exc.value.kind is FailureKind.MALFORMED_JSON
        assert "Invalid JSON" in str(exc.value)


class TestParseVerdictReply:
    def test_unquoted_keys(self):
        verdict = parse_verdict_reply('{verdict:"scam",score:95,reason:"x",category:"scam"}')
        assert verdict.verdict == "scam"
        assert verdict.score == 95
        assert verdict.reason == "x"
        assert verdict.category == "scam"

    def test_fenced_reply_with_sources(self):
        text = (
            "```json\n"
            '{"verdict": "suspicious", "score": "72", "reason": "Lookalike domain",'
            ' "category": "url", "suggestedSources": ["https://safebrowsing.google.com"]}\n'
            "```"
        )
        verdict = parse_verdict_reply(text)
        assert verdict.verdict == "suspicious"
        assert verdict.score == 72
        assert verdict.suggested_sources == ["https://safebrowsing.google.com"]

    def test_label_case_insensitive(self):
        assert parse_verdict_reply('{"verdict": "SAFE", "score": 3}').verdict == "safe"

    def test_absent_fields_stay_none(self):
        verdict = parse_verdict_reply('{"verdict": "safe"}')
        assert verdict.score == 0
        assert verdict.reason is None
        assert verdict.category is None
        assert verdict.suggested_sources is None

    @pytest.mark.parametrize("raw,expected", [(150, 100), (-4, 0), ("abc", 0), (61.7, 61)])
    def test_score_coerced(self, raw, expected):
        verdict = parse_verdict_reply(json.dumps({"verdict": "scam", "score": raw}))
        assert verdict.score == expected

    def test_unknown_label(self):
        with pytest.raises(ReplyParseError) as exc:
            parse_verdict_reply('{"verdict": "probably fine", "score": 20}')
        assert exc.value.kind is FailureKind.MALFORMED_JSON

    def test_error_label_rejected(self):
        with pytest.raises(ReplyParseError):
            parse_verdict_reply('{"verdict": "error", "score": 0}')

    def test_sources_not_a_list_dropped(self):
        verdict = parse_verdict_reply('{"verdict": "safe", "suggestedSources": "none"}')
        assert verdict.suggested_sources is None

    def test_key_like_text_after_comma_in_value_breaks_parse(self):
        with pytest.raises(ReplyParseError) as exc:
            parse_verdict_reply('{"verdict": "scam", "reason": "urgent, note: pay now"}')
        assert exc.value.kind is FailureKind.MALFORMED_JSON


class TestNonFiniteScore:
    @pytest.mark.parametrize("raw_score", ["Infinity", "-Infinity", "1e999", '"inf"', "NaN"])
    def test_non_finite_score_becomes_zero(self, raw_score):
        verdict = parse_verdict_reply('{"verdict": "scam", "score": %s}' % raw_score)
        assert verdict.verdict == "scam"
        assert verdict.score == 0
