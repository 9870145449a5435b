"""Email address value object."""

import re
from typing import Any

from custom_type.core.domain.base import StringValueObject
from custom_type.core.errors import ParseError
from custom_type.core.logging import get_logger
from custom_type.core.result import ParseResult

logger = get_logger(__name__)

EMAIL_REGEX = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)+"
)

INVALID_EMAIL_MESSAGE = "unable to parse email, invalid email."


class Email(StringValueObject):
    """
    Email address, lowercased and validated.

    The host must contain at least one dot, so ``user@localhost`` is rejected.
    Two inputs that differ only in case parse to equal values.
    """

    @classmethod
    def parse(cls, value: Any) -> ParseResult["Email"]:
        """
        Parse raw input into an Email.

        Args:
            value: Stringlike input, converted with ``str()``

        Returns:
            ParseResult holding the Email or a ParseError
        """
        email = str(value).lower()

        if not EMAIL_REGEX.fullmatch(email):
            logger.debug("email_parse_failed", field="email", input_length=len(email))
            return ParseResult.fail(ParseError(INVALID_EMAIL_MESSAGE, field="email"))

        return ParseResult.ok(cls._create(email))

    @classmethod
    def from_json(cls, raw: str) -> "Email":
        return cls.parse(raw).unwrap()

    @property
    def local_part(self) -> str:
        """Get local part of email."""
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        """Get email domain."""
        return self.value.split("@")[1]


__all__ = ["EMAIL_REGEX", "INVALID_EMAIL_MESSAGE", "Email"]
