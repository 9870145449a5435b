"""Result type returned by every smart constructor.

Parsing untrusted input is expected to fail regularly, so constructors hand
failures back as values instead of raising. Callers that prefer exceptions use
``unwrap()``.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from custom_type.core.errors import ParseError

TValue = TypeVar("TValue")
TMapped = TypeVar("TMapped")


class ParseResult(Generic[TValue]):
    """
    Standardized parse result wrapper.

    Holds either a parsed value or the ParseError explaining why the input was
    rejected, never both.

    Usage Example:
        result = Email.parse(raw)
        if result.is_err():
            return render_error(result.error.message)
        email = result.value
    """

    __slots__ = ("_error", "_value")

    def __init__(self, value: TValue | None = None, error: ParseError | None = None):
        if (value is None) == (error is None):
            raise ValueError("ParseResult needs exactly one of value or error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: TValue) -> "ParseResult[TValue]":
        """Create successful result."""
        return cls(value=value)

    @classmethod
    def fail(cls, error: ParseError) -> "ParseResult[TValue]":
        """Create failed result."""
        return cls(error=error)

    def is_ok(self) -> bool:
        """Check if parsing succeeded."""
        return self._error is None

    def is_err(self) -> bool:
        """Check if parsing failed."""
        return self._error is not None

    @property
    def value(self) -> TValue | None:
        """Parsed value, or None on failure."""
        return self._value

    @property
    def error(self) -> ParseError | None:
        """Parse error, or None on success."""
        return self._error

    def unwrap(self) -> TValue:
        """
        Get the parsed value.

        Raises:
            ParseError: If parsing failed
        """
        if self._error is not None:
            raise self._error
        return self._value

    def unwrap_or(self, default: Any) -> Any:
        """Get the parsed value, or ``default`` on failure."""
        if self._error is not None:
            return default
        return self._value

    def map(self, func: Callable[[TValue], TMapped]) -> "ParseResult[TMapped]":
        """Apply ``func`` to a successful value; failures pass through."""
        if self._error is not None:
            return ParseResult.fail(self._error)
        return ParseResult.ok(func(self._value))

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        if self._error is not None:
            return {"success": False, "error": self._error.to_dict()}
        return {"success": True, "data": str(self._value)}

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self._value == other._value and self._error == other._error

    def __hash__(self) -> int:
        return hash((self._value, self._error))

    def __bool__(self) -> bool:
        return self.is_ok()

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Err({self._error!r})"
        return f"Ok({self._value!r})"


__all__ = ["ParseResult"]
