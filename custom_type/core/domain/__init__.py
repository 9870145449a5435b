"""Domain layer core classes."""

from custom_type.core.domain.base import StringValueObject, ValueObject

__all__ = [
    "StringValueObject",
    "ValueObject",
]
