"""Unit tests for ParseResult."""

import pytest

from custom_type.core.errors import ParseError
from custom_type.core.result import ParseResult


@pytest.mark.unit
class TestParseResult:
    """Test suite for ParseResult."""

    def test_ok_result(self):
        result = ParseResult.ok("value")

        assert result.is_ok()
        assert not result.is_err()
        assert result.value == "value"
        assert result.error is None
        assert result.unwrap() == "value"
        assert result.unwrap_or("default") == "value"
        assert bool(result) is True

    def test_failed_result(self):
        error = ParseError("bad input")
        result = ParseResult.fail(error)

        assert result.is_err()
        assert result.value is None
        assert result.error is error
        assert result.unwrap_or("default") == "default"
        assert bool(result) is False

        with pytest.raises(ParseError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_requires_exactly_one_side(self):
        with pytest.raises(ValueError):
            ParseResult()
        with pytest.raises(ValueError):
            ParseResult(value="x", error=ParseError("y"))

    def test_map(self):
        assert ParseResult.ok("abc").map(str.upper) == ParseResult.ok("ABC")

        failed = ParseResult.fail(ParseError("bad"))
        assert failed.map(str.upper) == failed

    def test_equality(self):
        assert ParseResult.ok(1) == ParseResult.ok(1)
        assert ParseResult.ok(1) != ParseResult.ok(2)
        assert ParseResult.fail(ParseError("a")) == ParseResult.fail(ParseError("a"))
        assert ParseResult.fail(ParseError("a")) != ParseResult.fail(ParseError("b"))
        assert ParseResult.ok("a") != ParseResult.fail(ParseError("a"))
        assert hash(ParseResult.ok("a")) == hash(ParseResult.ok("a"))

    def test_repr(self):
        assert repr(ParseResult.ok("x")) == "Ok('x')"
        assert repr(ParseResult.fail(ParseError("bad"))) == "Err(ParseError('bad'))"

    def test_to_dict(self):
        assert ParseResult.ok("x").to_dict() == {"success": True, "data": "x"}
        assert ParseResult.fail(ParseError("bad")).to_dict() == {
            "success": False,
            "error": {"error": "PARSE_ERROR", "message": "bad"},
        }
