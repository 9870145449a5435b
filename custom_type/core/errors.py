"""Error classes shared by every smart constructor."""

from typing import Any


class CustomTypeError(Exception):
    """
    Base exception for all custom_type errors.

    Carries a machine readable code and a details dictionary so callers can
    surface the failure without parsing the message.
    """

    default_code: str = "ERROR"

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.__cause__ = kwargs.get("cause")

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Serialize error for API responses or logging.

        Args:
            include_details: Include error details
        """
        data = {
            "error": self.code,
            "message": self.message,
        }

        if include_details and self.details:
            data["details"] = {
                k: v for k, v in self.details.items() if not k.startswith("_")
            }

        return data

    def __str__(self) -> str:
        return self.message


class ValidationError(CustomTypeError):
    """Validation error with optional field information."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field:
            self.details["field"] = field


class ParseError(ValidationError):
    """
    Raw input could not be parsed into a value object.

    Two parse errors are equal when they have the same class and message, which
    lets failed results be compared in the same way as successful ones.
    """

    default_code = "PARSE_ERROR"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.message))

    def __repr__(self) -> str:
        return f"ParseError({self.message!r})"


class ConfigurationError(CustomTypeError):
    """Configuration error."""

    default_code = "CONFIGURATION_ERROR"

    def __init__(
        self, message: str, config_key: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        if config_key:
            self.details["config_key"] = config_key


__all__ = [
    "ConfigurationError",
    "CustomTypeError",
    "ParseError",
    "ValidationError",
]
