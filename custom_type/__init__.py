"""Parse untrusted strings into validated, immutable domain values.

Example:
    from custom_type import CountryCode, Email, PhoneNumber, RawPassword

    email = Email.parse("Example@Example.COM").unwrap()
    phone = PhoneNumber.parse(CountryCode.USA, "1234567890").unwrap()
    password = RawPassword.parse_strict("Valid123!")
    if password.is_err():
        print(password.error.message)
"""

from custom_type.core.enums import PasswordStrength
from custom_type.core.errors import (
    ConfigurationError,
    CustomTypeError,
    ParseError,
    ValidationError,
)
from custom_type.core.result import ParseResult
from custom_type.value_objects import (
    CountryCode,
    Email,
    PhoneNumber,
    RawPassword,
    Url,
    dial_code,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CountryCode",
    "CustomTypeError",
    "Email",
    "ParseError",
    "ParseResult",
    "PasswordStrength",
    "PhoneNumber",
    "RawPassword",
    "Url",
    "ValidationError",
    "dial_code",
]
