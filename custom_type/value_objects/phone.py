"""Phone number value object."""

import re
from typing import Any

from custom_type.core.domain.base import StringValueObject
from custom_type.core.errors import ParseError
from custom_type.core.logging import get_logger
from custom_type.core.result import ParseResult
from custom_type.value_objects.country_code import CountryCode, dial_code

logger = get_logger(__name__)

PHONE_DIGITS_REGEX = re.compile(r"[0-9]{10,15}")

INVALID_PHONE_MESSAGE = "unable to parse phone number, invalid phone number."

# Longest dial codes first, so "+212" is tried before "+1" would be.
_COUNTRIES_BY_CODE_LENGTH = sorted(
    CountryCode, key=lambda country: len(country.dial_code), reverse=True
)


class PhoneNumber(StringValueObject):
    """
    Phone number in ``<dial code><digits>`` form, e.g. ``+11234567890``.

    The digit payload is validated on its own (10 to 15 ASCII digits) and the
    country only contributes its prefix. No per-country length rules apply.
    """

    @classmethod
    def parse(cls, country: CountryCode, digits: Any) -> ParseResult["PhoneNumber"]:
        """
        Parse a national digit string for ``country``.

        Args:
            country: Country whose dial code prefixes the number
            digits: Stringlike input, converted with ``str()``

        Returns:
            ParseResult holding the PhoneNumber or a ParseError

        Raises:
            TypeError: If ``country`` is not a CountryCode
        """
        if not isinstance(country, CountryCode):
            raise TypeError(
                f"country must be a CountryCode, got {type(country).__name__}"
            )

        number = str(digits)

        if not PHONE_DIGITS_REGEX.fullmatch(number):
            logger.debug(
                "phone_parse_failed",
                field="phone_number",
                country=country.name,
                input_length=len(number),
            )
            return ParseResult.fail(
                ParseError(INVALID_PHONE_MESSAGE, field="phone_number")
            )

        return ParseResult.ok(
            cls._create(f"{dial_code(country)}{number}", country=country)
        )

    @classmethod
    def parse_international(cls, value: Any) -> ParseResult["PhoneNumber"]:
        """
        Parse an already prefixed number such as ``+441234567890``.

        Dial codes are not prefix-free, so every code the input starts with is
        tried, longest first, and the first split whose remainder passes the
        digit grammar wins. The wrapped string always equals the input.

        The country of the result is inferred from the dial code, so it may
        differ from the country originally passed to ``parse`` if two countries
        share a code. Equality only compares the wrapped string.
        """
        text = str(value)

        for country in _COUNTRIES_BY_CODE_LENGTH:
            if not text.startswith(country.dial_code):
                continue
            if PHONE_DIGITS_REGEX.fullmatch(text[len(country.dial_code):]):
                return cls.parse(country, text[len(country.dial_code):])

        logger.debug(
            "phone_parse_failed", field="phone_number", input_length=len(text)
        )
        return ParseResult.fail(ParseError(INVALID_PHONE_MESSAGE, field="phone_number"))

    @classmethod
    def from_json(cls, raw: str) -> "PhoneNumber":
        return cls.parse_international(raw).unwrap()

    @property
    def country_code(self) -> CountryCode:
        """
        Country whose dial code prefixes this number.

        For values built by ``parse_international`` or ``from_json`` this is
        inferred from the dial code.
        """
        return self._country

    @property
    def national_number(self) -> str:
        """Digits following the dial code."""
        return self.value[len(self._country.dial_code):]


__all__ = ["INVALID_PHONE_MESSAGE", "PHONE_DIGITS_REGEX", "PhoneNumber"]
