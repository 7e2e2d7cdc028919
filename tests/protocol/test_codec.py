"""Tests for line framing."""

import json

import pytest

from simple_mcp.protocol.codec import decode_line, encode_message, strip_line
from simple_mcp.protocol.errors import ParseError


class TestStripLine:
    def test_strips_lf(self) -> None:
        assert strip_line('{"a":1}\n') == '{"a":1}'

    def test_strips_crlf(self) -> None:
        assert strip_line('{"a":1}\r\n') == '{"a":1}'

    @pytest.mark.parametrize("raw", ["\n", "   \n", "\t\r\n", ""])
    def test_blank_is_none(self, raw: str) -> None:
        assert strip_line(raw) is None


class TestDecodeLine:
    def test_object(self) -> None:
        assert decode_line('{"jsonrpc":"2.0"}') == {"jsonrpc": "2.0"}

    def test_non_object_values_decode(self) -> None:
        assert decode_line("[1, 2]") == [1, 2]
        assert decode_line("42") == 42

    def test_invalid_raises_parse_error(self) -> None:
        with pytest.raises(ParseError, match="Parse error"):
            decode_line("INVALID_JSON")

    def test_truncated_object(self) -> None:
        with pytest.raises(ParseError):
            decode_line('{"jsonrpc": "2.0"')

    def test_two_documents_on_one_line(self) -> None:
        with pytest.raises(ParseError):
            decode_line('{"a":1} {"b":2}')

    def test_nan_rejected(self) -> None:
        with pytest.raises(ParseError):
            decode_line('{"id": NaN}')

    @pytest.mark.parametrize("literal", ["1e400", "-1e400", "[1, 2e999]"])
    def test_overflowing_number_rejected(self, literal: str) -> None:
        with pytest.raises(ParseError):
            decode_line(literal)

    def test_finite_float_kept(self) -> None:
        assert decode_line("2.5e3") == 2500.0

    def test_large_integer_kept(self) -> None:
        assert decode_line("1" + "0" * 400) == 10**400


class TestEncodeMessage:
    def test_single_line_with_terminator(self) -> None:
        out = encode_message({"text": "line1\nline2 "})
        assert out.endswith("\n")
        assert out.count("\n") == 1
        assert " " not in out
        assert json.loads(out) == {"text": "line1\nline2 "}

    def test_null_id_kept(self) -> None:
        assert json.loads(encode_message({"id": None}))["id"] is None

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_refused(self, value: float) -> None:
        with pytest.raises(ValueError):
            encode_message({"id": value})
