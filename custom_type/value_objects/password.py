"""
Raw Password Value Object

Represents a plaintext password that satisfied one of three strength tiers.
Hashing for storage is a separate concern and is not handled here.
"""

import re
from typing import Any

from custom_type.core.config import get_settings
from custom_type.core.domain.base import StringValueObject
from custom_type.core.enums import PasswordStrength
from custom_type.core.errors import ParseError
from custom_type.core.logging import get_logger
from custom_type.core.result import ParseResult

logger = get_logger(__name__)

MIN_LENGTH = 8

DIGIT_REGEX = re.compile(r"[0-9]")
LETTER_REGEX = re.compile(r"[a-zA-Z]")
UPPER_REGEX = re.compile(r"[A-Z]")
LOWER_REGEX = re.compile(r"[a-z]")
SPECIAL_REGEX = re.compile(r"[^a-zA-Z0-9]")

WEAK_PASSWORD_MESSAGE = "Weak password: must be at least 8 characters long"
MEDIUM_PASSWORD_MESSAGE = (
    "Medium password: must be at least 8 characters long "
    "and contain both letters and digits"
)
STRICT_PASSWORD_MESSAGE = (
    "Strict password: must be at least 8 characters long "
    "and contain uppercase, lowercase, digits, and special characters"
)


class RawPassword(StringValueObject):
    """
    Plaintext password validated against a strength tier.

    The value does not remember which tier accepted it. ``str()`` returns the
    password unchanged; ``repr()`` masks it.

    Usage Example:
        result = RawPassword.parse_strict(form["password"])
        if result.is_err():
            return result.error.message
        hasher.hash(str(result.value))
    """

    @classmethod
    def parse_weak(cls, value: Any) -> ParseResult["RawPassword"]:
        """Accept any password of at least 8 characters."""
        password = str(value)

        if len(password) < MIN_LENGTH:
            return cls._reject(PasswordStrength.WEAK, password, WEAK_PASSWORD_MESSAGE)

        return ParseResult.ok(cls._create(password))

    @classmethod
    def parse_medium(cls, value: Any) -> ParseResult["RawPassword"]:
        """Accept passwords of at least 8 characters with a letter and a digit."""
        password = str(value)

        if (
            len(password) < MIN_LENGTH
            or not DIGIT_REGEX.search(password)
            or not LETTER_REGEX.search(password)
        ):
            return cls._reject(
                PasswordStrength.MEDIUM, password, MEDIUM_PASSWORD_MESSAGE
            )

        return ParseResult.ok(cls._create(password))

    @classmethod
    def parse_strict(cls, value: Any) -> ParseResult["RawPassword"]:
        """
        Accept passwords of at least 8 characters mixing character classes.

        Requires an uppercase letter, a lowercase letter, a digit and a
        character that is neither an ASCII letter nor a digit.
        """
        password = str(value)

        if (
            len(password) < MIN_LENGTH
            or not UPPER_REGEX.search(password)
            or not LOWER_REGEX.search(password)
            or not DIGIT_REGEX.search(password)
            or not SPECIAL_REGEX.search(password)
        ):
            return cls._reject(
                PasswordStrength.STRICT, password, STRICT_PASSWORD_MESSAGE
            )

        return ParseResult.ok(cls._create(password))

    @classmethod
    def parse(
        cls, value: Any, strength: PasswordStrength | None = None
    ) -> ParseResult["RawPassword"]:
        """
        Parse with the tier named by ``strength``.

        Args:
            value: Stringlike input, converted with ``str()``
            strength: Tier to enforce, defaults to the configured tier
        """
        if strength is None:
            strength = get_settings().default_password_strength

        parsers = {
            PasswordStrength.WEAK: cls.parse_weak,
            PasswordStrength.MEDIUM: cls.parse_medium,
            PasswordStrength.STRICT: cls.parse_strict,
        }
        return parsers[strength](value)

    @classmethod
    def from_json(cls, raw: str) -> "RawPassword":
        return cls.parse(raw).unwrap()

    @classmethod
    def _reject(
        cls, strength: PasswordStrength, password: str, message: str
    ) -> ParseResult["RawPassword"]:
        logger.debug(
            "password_parse_failed",
            field="password",
            strength=strength.value,
            input_length=len(password),
        )
        return ParseResult.fail(ParseError(message, field="password"))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('********')"


__all__ = [
    "MEDIUM_PASSWORD_MESSAGE",
    "MIN_LENGTH",
    "RawPassword",
    "STRICT_PASSWORD_MESSAGE",
    "WEAK_PASSWORD_MESSAGE",
]
