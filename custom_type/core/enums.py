"""Shared enums for the custom_type package.

Design Principles:
- Single source of truth for enum values
- Rich enum implementations with additional methods
- Framework-agnostic design
"""

from enum import Enum


class Environment(Enum):
    """Runtime environment types."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Create LogLevel from string representation."""
        level_str = level_str.upper()
        for level in cls:
            if level.level_name == level_str:
                return level
        raise ValueError(f"Invalid log level: {level_str}")

    def to_logging_level(self) -> int:
        """Convert to standard logging module level."""
        return self.priority


class LogFormat(Enum):
    """Log output formats."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


class PasswordStrength(Enum):
    """Password strength tiers, from most to least permissive."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRICT = "strict"

    @classmethod
    def from_string(cls, strength_str: str) -> "PasswordStrength":
        """Create PasswordStrength from string representation."""
        try:
            return cls(strength_str.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid password strength: {strength_str}") from None

    @property
    def rank(self) -> int:
        """Position in the strictness ordering (weak is 0)."""
        return list(PasswordStrength).index(self)


__all__ = ["Environment", "LogFormat", "LogLevel", "PasswordStrength"]
