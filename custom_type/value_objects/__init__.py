"""Validated value objects.

Every type here is immutable and can only be obtained through its ``parse``
constructor, so holding an instance means the wrapped string passed its
grammar.

Value Objects:
- Email: lowercased email address
- RawPassword: plaintext password at a weak, medium or strict tier
- PhoneNumber: country dial code followed by 10 to 15 digits
- Url: http, https or ftp URL

Enumerations:
- CountryCode: closed set of countries with their dial codes
"""

from custom_type.value_objects.country_code import CountryCode, dial_code
from custom_type.value_objects.email import Email
from custom_type.value_objects.password import RawPassword
from custom_type.value_objects.phone import PhoneNumber
from custom_type.value_objects.url import Url

__all__ = [
    "CountryCode",
    "Email",
    "PhoneNumber",
    "RawPassword",
    "Url",
    "dial_code",
]
