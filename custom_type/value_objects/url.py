"""URL value object."""

import re
from typing import Any

from custom_type.core.domain.base import StringValueObject
from custom_type.core.errors import ParseError
from custom_type.core.logging import get_logger
from custom_type.core.result import ParseResult

logger = get_logger(__name__)

# Scheme, a bare host label, a dot, then anything without whitespace.
URL_REGEX = re.compile(r"(https?|ftp)://[^\s/$.?#]+\.\S*")

INVALID_URL_MESSAGE = "unable to parse URL, invalid URL."


class Url(StringValueObject):
    """
    http, https or ftp URL.

    Only the shape is checked; the host is never resolved and the string is
    kept exactly as given.
    """

    @classmethod
    def parse(cls, value: Any) -> ParseResult["Url"]:
        """Parse raw input into a Url."""
        url = str(value)

        if not URL_REGEX.fullmatch(url):
            logger.debug("url_parse_failed", field="url", input_length=len(url))
            return ParseResult.fail(ParseError(INVALID_URL_MESSAGE, field="url"))

        return ParseResult.ok(cls._create(url))

    @classmethod
    def from_json(cls, raw: str) -> "Url":
        return cls.parse(raw).unwrap()

    @property
    def scheme(self) -> str:
        """URL scheme: http, https or ftp."""
        return self.value.split("://", 1)[0]


__all__ = ["INVALID_URL_MESSAGE", "URL_REGEX", "Url"]
