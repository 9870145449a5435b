"""Domain primitives following pure Python, framework-agnostic principles.

Design Principles:
- Pure Python classes with explicit validation
- Immutable value objects with equality defined by their attributes
- Smart constructors: validated classes can only be built through ``parse``
- Deserialization routed through the same ``parse`` path

Architecture:
- ValueObject: Immutable objects representing domain concepts
- StringValueObject: Value object wrapping a single validated string
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic_core import core_schema

from custom_type.core.errors import ParseError

TStringValue = TypeVar("TStringValue", bound="StringValueObject")

# Only code holding this key may call a validated value object's __init__.
_CONSTRUCTION_KEY = object()


# =====================================================================================
# VALUE OBJECT BASE CLASS
# =====================================================================================


class ValueObject(ABC):
    """
    Base value object following pure Python principles.

    Value objects are immutable objects that are defined entirely by their
    attributes. They have no conceptual identity and are equal when all their
    public attributes are equal.

    Design Features:
    - Immutable (no setters, frozen after construction)
    - Rich comparison and hashing support
    - Comprehensive string representations
    """

    def __init__(self):
        """Initialize value object. Subclasses should override with specific validation."""
        self._frozen = False
        self._hash_cache = None

    def _freeze(self) -> None:
        """Mark the object as frozen (immutable)."""
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if getattr(self, "_frozen", False) and name != "_hash_cache":
            raise AttributeError(f"Cannot modify immutable {self.__class__.__name__}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        """Prevent deletion of attributes."""
        if getattr(self, "_frozen", False):
            raise AttributeError(
                f"Cannot delete attribute from immutable {self.__class__.__name__}"
            )
        super().__delattr__(name)

    def _public_attributes(self) -> dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def __eq__(self, other: Any) -> bool:
        """
        Check equality based on all public attributes.

        Args:
            other: Object to compare with

        Returns:
            bool: True if objects are equal
        """
        if not isinstance(other, self.__class__):
            return False
        return self._public_attributes() == other._public_attributes()

    def __hash__(self) -> int:
        """Return hash based on all public attributes."""
        if self._hash_cache is None:
            values = tuple(sorted(self._public_attributes().items()))
            self._hash_cache = hash((self.__class__.__name__, values))
        return self._hash_cache

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        attrs_str = ", ".join(
            f"{key}={value!r}" for key, value in self._public_attributes().items()
        )
        return f"{self.__class__.__name__}({attrs_str})"

    @abstractmethod
    def __str__(self) -> str:
        """String representation. Must be implemented by subclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Convert value object to dictionary."""
        result = {}
        for key, value in self._public_attributes().items():
            if hasattr(value, "to_dict"):
                result[key] = value.to_dict()
            else:
                result[key] = value
        return result


# =====================================================================================
# STRING VALUE OBJECT
# =====================================================================================


class StringValueObject(ValueObject):
    """
    Value object wrapping a single validated string.

    Subclasses expose one or more ``parse`` classmethods returning a
    ``ParseResult`` and build successful values with ``_create``. Calling the
    class directly raises ``TypeError``, so an instance always holds a string
    that passed its grammar.

    Usage Example:
        class Slug(StringValueObject):
            @classmethod
            def parse(cls, value: Any) -> ParseResult["Slug"]:
                text = str(value)
                if not SLUG_REGEX.fullmatch(text):
                    return ParseResult.fail(ParseError("invalid slug."))
                return ParseResult.ok(cls._create(text))
    """

    def __init__(self, value: str, *, _key: object = None, **private: Any):
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                f"{self.__class__.__name__} cannot be instantiated directly, "
                f"use {self.__class__.__name__}.parse()"
            )
        super().__init__()
        self.value = value
        for name, attr in private.items():
            setattr(self, f"_{name}", attr)
        self._freeze()

    @classmethod
    def _create(cls: type[TStringValue], value: str, **private: Any) -> TStringValue:
        """
        Build an instance from a string that already passed validation.

        Extra keyword arguments are stored as private attributes and take no
        part in equality.
        """
        return cls(value, _key=_CONSTRUCTION_KEY, **private)

    @classmethod
    @abstractmethod
    def from_json(cls: type[TStringValue], raw: str) -> TStringValue:
        """
        Deserialize a plain string through the validating constructor.

        Raises:
            ParseError: If ``raw`` is not valid for this type
        """

    def to_json(self) -> str:
        """Serialize to the plain wrapped string."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo: dict[int, Any]):
        return self

    @classmethod
    def _validate_external(cls: type[TStringValue], value: Any) -> TStringValue:
        """Validation hook used by pydantic models holding this type."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} must be given a string")
        try:
            return cls.from_json(value)
        except ParseError as e:
            raise ValueError(e.message) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls._validate_external, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_plain_validator_function(
                cls._validate_external
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


__all__ = ["StringValueObject", "ValueObject"]
