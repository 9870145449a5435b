"""Configuration management following pure Python principles.

Settings are read from environment variables, optionally seeded from a
``.env`` file. Values already present in the environment always win over the
file.

Recognized variables:
- CUSTOM_TYPE_ENVIRONMENT: dev, test, staging or prod
- CUSTOM_TYPE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
- CUSTOM_TYPE_LOG_FORMAT: json, console or plain
- CUSTOM_TYPE_PASSWORD_STRENGTH: weak, medium or strict
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any

from custom_type.core.enums import Environment, LogFormat, LogLevel, PasswordStrength
from custom_type.core.errors import ConfigurationError

ENV_PREFIX = "CUSTOM_TYPE_"


# =====================================================================================
# ENVIRONMENT LOADER
# =====================================================================================


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Design Features:
    - Environment file support
    - Enum conversion with clear error messages
    - Default value handling
    """

    def __init__(self, env_file: str | None = ".env", prefix: str = ENV_PREFIX):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to load
            prefix: Prefix prepended to every key
        """
        self.env_file = env_file
        self.prefix = prefix
        self._load_env_file()

    def _load_env_file(self) -> None:
        """Load environment variables from file if it exists."""
        if not self.env_file or not os.path.exists(self.env_file):
            return

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    if key not in os.environ:
                        os.environ[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}"
            ) from e

    def get_string(self, key: str, default: str | None = None) -> str | None:
        """Get string value from environment."""
        value = os.environ.get(f"{self.prefix}{key}")
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_enum(
        self,
        key: str,
        converter: Any,
        default: Enum,
    ) -> Any:
        """
        Get enum value from environment.

        Args:
            key: Variable name without prefix
            converter: Callable turning the raw string into an enum member
            default: Member returned when the variable is unset

        Raises:
            ConfigurationError: If the raw value is not a valid member
        """
        raw = self.get_string(key)
        if raw is None:
            return default

        try:
            return converter(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {self.prefix}{key}: {raw!r}",
                config_key=f"{self.prefix}{key}",
                cause=e,
            ) from e


# =====================================================================================
# SETTINGS
# =====================================================================================


@dataclass(frozen=True)
class Settings:
    """
    Package settings.

    Usage Example:
        settings = Settings.from_env()
        RawPassword.parse(raw, settings.default_password_strength)
    """

    environment: Environment = field(default=Environment.DEVELOPMENT)
    log_level: LogLevel = field(default=LogLevel.INFO)
    log_format: LogFormat = field(default=LogFormat.CONSOLE)
    default_password_strength: PasswordStrength = field(
        default=PasswordStrength.STRICT
    )

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If any variable holds an invalid value
        """
        loader = EnvironmentLoader(env_file)

        return cls(
            environment=loader.get_enum(
                "ENVIRONMENT",
                lambda raw: Environment(raw.lower()),
                Environment.DEVELOPMENT,
            ),
            log_level=loader.get_enum("LOG_LEVEL", LogLevel.from_string, LogLevel.INFO),
            log_format=loader.get_enum(
                "LOG_FORMAT", lambda raw: LogFormat(raw.lower()), LogFormat.CONSOLE
            ),
            default_password_strength=loader.get_enum(
                "PASSWORD_STRENGTH",
                PasswordStrength.from_string,
                PasswordStrength.STRICT,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "environment": self.environment.value,
            "log_level": self.log_level.level_name,
            "log_format": self.log_format.value,
            "default_password_strength": self.default_password_strength.value,
        }


@lru_cache
def get_settings(env_file: str | None = ".env") -> Settings:
    """Get cached settings instance."""
    return Settings.from_env(env_file)


__all__ = ["ENV_PREFIX", "EnvironmentLoader", "Settings", "get_settings"]
