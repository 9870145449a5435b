# ruff: noqa: A005
"""Structured logging for the custom_type package.

Package modules log through ``get_logger``, which wraps a lazy structlog
logger and never touches global logging state. Records therefore flow through
whatever structlog and standard library configuration the host application
has set up. ``configure_logging`` is an explicit opt-in for callers that want
this package to install its own processor chain.

Architecture:
- LogConfig: Configuration management with validation
- LogFilter: Security filters for sensitive data sanitization
- StructuredLogger: Logger wrapper applying level checks and filters
- LoggerFactory: Logger creation and configuration

Note: This module name intentionally shadows the standard library 'logging'
module inside the package namespace.
"""

import logging
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from custom_type.core.enums import Environment, LogFormat, LogLevel
from custom_type.core.errors import ConfigurationError

# =====================================================================================
# CONFIGURATION CLASSES
# =====================================================================================


@dataclass
class LogConfig:
    """
    Logging configuration with validation and environment defaults.

    Usage Example:
        config = LogConfig(
            level=LogLevel.DEBUG,
            format=LogFormat.JSON,
            environment=Environment.PRODUCTION,
        )
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.CONSOLE)
    environment: Environment = field(default=Environment.DEVELOPMENT)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_sensitive_data_filtering: bool = field(default=True)
    max_message_length: int = field(default=10000)

    def __post_init__(self):
        """Post-initialization validation and setup."""
        self.validate()
        self.apply_environment_defaults()

    def validate(self) -> None:
        """
        Validate logging configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.max_message_length < 1000:
            raise ConfigurationError(
                "Maximum message length must be at least 1000 characters"
            )

    def apply_environment_defaults(self) -> None:
        """Apply environment-specific defaults."""
        if self.environment == Environment.DEVELOPMENT:
            self.enable_caller_info = True

        elif self.environment == Environment.TESTING:
            self.format = LogFormat.PLAIN

        elif self.environment == Environment.PRODUCTION:
            self.format = LogFormat.JSON
            self.enable_caller_info = False
            self.enable_sensitive_data_filtering = True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_sensitive_data_filtering": self.enable_sensitive_data_filtering,
            "max_message_length": self.max_message_length,
        }


# =====================================================================================
# SECURITY FILTERS
# =====================================================================================


class LogFilter(ABC):
    """Abstract base class for log record sanitization."""

    @abstractmethod
    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Filter and sanitize log record.

        Args:
            record: Log record to filter

        Returns:
            dict[str, Any]: Filtered log record
        """


class SensitiveDataFilter(LogFilter):
    """
    Masks values stored under sensitive keys (passwords, secrets, tokens) and
    scrubs email addresses out of free-text values.
    """

    SENSITIVE_KEY_PATTERN = re.compile(r"password|token|secret|credential", re.I)
    EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

    def __init__(self, mask_char: str = "*", preserve_length: bool = False):
        self.mask_char = mask_char
        self.preserve_length = preserve_length

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        filtered_record = {}

        for key, value in record.items():
            if self.SENSITIVE_KEY_PATTERN.search(key):
                filtered_record[key] = self._mask(value)
            elif isinstance(value, str):
                filtered_record[key] = self.EMAIL_PATTERN.sub(
                    lambda m: self._mask(m.group()), value
                )
            elif isinstance(value, dict):
                filtered_record[key] = self.filter(value)
            else:
                filtered_record[key] = value

        return filtered_record

    def _mask(self, value: Any) -> str | None:
        if value is None:
            return None
        if self.preserve_length:
            return self.mask_char * len(str(value))
        return f"{self.mask_char * 3}[MASKED]"


class MessageLengthFilter(LogFilter):
    """Truncates overly long log messages."""

    def __init__(
        self, max_length: int = 10000, truncation_suffix: str = "... [TRUNCATED]"
    ):
        self.max_length = max_length
        self.truncation_suffix = truncation_suffix

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        message = record.get("message", "")
        if not isinstance(message, str) or len(message) <= self.max_length:
            return record

        keep = self.max_length - len(self.truncation_suffix)
        return {
            **record,
            "message": message[:keep] + self.truncation_suffix,
            "message_truncated": True,
        }


# =====================================================================================
# STRUCTURED LOGGER
# =====================================================================================


class StructuredLogger:
    """Structured logger applying level checks and security filters."""

    def __init__(self, name: str, config: LogConfig):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            config: Logging configuration
        """
        self.name = name
        self.apply_config(config)
        # Lazy proxy: binds against the structlog configuration current at call time.
        self._logger = structlog.get_logger(name)

    def apply_config(self, config: LogConfig) -> None:
        """Swap in a new configuration and rebuild the filter chain."""
        self.config = config
        self.filters: list[LogFilter] = []
        if config.enable_sensitive_data_filtering:
            self.filters.append(SensitiveDataFilter())
        self.filters.append(MessageLengthFilter(config.max_message_length))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether records at ``level`` would be emitted."""
        return level.priority >= self.config.level.priority

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if not self.is_enabled_for(level):
            return

        record = {"message": message, **kwargs}
        for filter_instance in self.filters:
            record = filter_instance.filter(record)

        getattr(self._logger, level.level_name.lower())(
            record.pop("message"), **record
        )


# =====================================================================================
# LOGGER FACTORY
# =====================================================================================


class LoggerFactory:
    """Creates and caches structured loggers sharing one configuration."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}

    def apply_config(self, config: LogConfig) -> None:
        """Apply a new configuration to the factory and every cached logger."""
        self.config = config
        for logger in self._loggers.values():
            logger.apply_config(config)

    def configure_structlog(self) -> None:
        """Install structlog processors and the standard library root handler."""
        processors = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ]
                )
            )

        processors.extend(
            [
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
            ]
        )

        if self.config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        elif self.config.format == LogFormat.CONSOLE:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        logging.basicConfig(format="%(message)s", stream=sys.stdout)
        logging.getLogger().setLevel(self.config.level.to_logging_level())

    def get_logger(self, name: str) -> StructuredLogger:
        """Get or create structured logger."""
        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(name, self.config)
        return self._loggers[name]


# =====================================================================================
# GLOBAL FACTORY
# =====================================================================================

_logger_factory = LoggerFactory(LogConfig())


def configure_logging(
    config: LogConfig | None = None, *, configure_structlog: bool = True
) -> None:
    """
    Opt in to this package's logging setup.

    Args:
        config: Logging configuration (built from settings if not provided)
        configure_structlog: Also install the structlog processor chain and
            root handler. When False only the package loggers' level and
            filters change.
    """
    if config is None:
        from custom_type.core.config import get_settings

        settings = get_settings()
        config = LogConfig(
            level=settings.log_level,
            format=settings.log_format,
            environment=settings.environment,
        )

    _logger_factory.apply_config(config)
    if configure_structlog:
        _logger_factory.configure_structlog()


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return _logger_factory.get_logger(name)


__all__ = [
    "LogConfig",
    "LogFilter",
    "LoggerFactory",
    "MessageLengthFilter",
    "SensitiveDataFilter",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
