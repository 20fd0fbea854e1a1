"""Logging configuration for neo-paging and the services using it.

The library only emits DEBUG records through module level loggers and never
configures logging on import. Applications call setup_logging() once at
startup to get console output driven by environment variables or settings.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import PagingSettings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging, including page computations


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level, WARNING for unknown modes."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "asyncio",
        "asyncpg",
    ]

    PACKAGE_LOGGER = "neo_paging"

    @classmethod
    def build(
        cls,
        verbosity: str = "NORMAL",
        log_format: str = "simple",
        log_level: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping.

        Args:
            verbosity: One of LogVerbosity, decides the root level
            log_format: One of LogFormat, unknown values fall back to simple
            log_level: Explicit level for the neo_paging logger; defaults to
                the level derived from verbosity

        Returns:
            Configuration dictionary for logging.config.dictConfig
        """
        effective_log_level = get_log_level_from_verbosity(verbosity)
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {
                cls.PACKAGE_LOGGER: {
                    "level": (log_level or effective_log_level).upper(),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[PagingSettings] = None) -> None:
        """Configure logging from settings.

        Uses get_settings(), i.e. the NEO_PAGING_LOG_* environment
        variables, when no settings object is given. Without an explicit
        log_level the neo_paging logger follows log_verbosity.
        """
        settings = settings or get_settings()
        verbosity = settings.log_verbosity
        log_format = settings.log_format
        log_level = settings.log_level

        logging.config.dictConfig(cls.build(verbosity, log_format, log_level))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: verbosity={verbosity}, format={log_format}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for the given module name."""
        return logging.getLogger(name)


def setup_logging(settings: Optional[PagingSettings] = None) -> None:
    """Setup logging configuration.

    Call once at application startup.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return LoggingConfig.get_logger(name)
