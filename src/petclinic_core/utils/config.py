"""
Settings and logging setup.

``PetClinicSettings`` gathers the few knobs the package has (database URL,
photo directory and size limit, log level) and can be filled from
``PETCLINIC_*`` environment variables. ``LoggingConfigurator`` wires the
standard library logging module for applications embedding the package.
"""

import logging
import logging.config
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions import ConfigurationException

MAX_PHOTO_SIZE = 5 * 1024 * 1024  # 5MB

_TRUE_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})


class LogLevel(Enum):
    """Log levels accepted in settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _missing(key: str) -> ConfigurationException:
    return ConfigurationException(
        f"Required environment variable '{key}' is not set", config_key=key
    )


class EnvironmentConfig:
    """Typed access to environment variables."""

    @staticmethod
    def get_str(
        key: str, default: Optional[str] = None, required: bool = False
    ) -> Optional[str]:
        value = os.getenv(key, default)
        if value is None and required:
            raise _missing(key)
        return value

    @staticmethod
    def get_int(
        key: str, default: Optional[int] = None, required: bool = False
    ) -> Optional[int]:
        """
        Read an integer.

        Raises:
            ConfigurationException: If the variable is required but unset, or
                is set to something that is not an integer
        """
        raw = os.getenv(key)
        if raw is None:
            if required:
                raise _missing(key)
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationException(
                f"Environment variable '{key}' must be an integer, got: {raw}",
                config_key=key,
                config_value=raw,
            )

    @staticmethod
    def get_bool(
        key: str, default: Optional[bool] = None, required: bool = False
    ) -> Optional[bool]:
        """Read a flag; anything outside true/1/yes/on/enabled is False."""
        raw = os.getenv(key)
        if raw is None:
            if required:
                raise _missing(key)
            return default
        return raw.strip().lower() in _TRUE_VALUES


@dataclass
class PetClinicSettings:
    """Runtime settings for the clinic package."""

    database_url: str = "sqlite+aiosqlite:///petclinic.db"
    photo_upload_dir: str = "static/images/pets"
    max_photo_size: int = MAX_PHOTO_SIZE
    log_level: LogLevel = LogLevel.INFO
    echo_sql: bool = False

    @classmethod
    def from_environment(cls, prefix: str = "PETCLINIC_") -> "PetClinicSettings":
        """
        Build settings from environment variables.

        Reads ``<prefix>DATABASE_URL``, ``<prefix>PHOTO_UPLOAD_DIR``,
        ``<prefix>MAX_PHOTO_SIZE``, ``<prefix>LOG_LEVEL`` and
        ``<prefix>ECHO_SQL``; unset variables keep their defaults.

        Raises:
            ConfigurationException: If a value cannot be converted
        """
        defaults = cls()
        env = EnvironmentConfig

        level_name = env.get_str(f"{prefix}LOG_LEVEL", defaults.log_level.value)
        try:
            log_level = LogLevel(level_name.upper())
        except ValueError:
            raise ConfigurationException(
                f"Unknown log level: {level_name}",
                config_key=f"{prefix}LOG_LEVEL",
                config_value=level_name,
            )

        max_photo_size = env.get_int(f"{prefix}MAX_PHOTO_SIZE", defaults.max_photo_size)
        if max_photo_size <= 0:
            raise ConfigurationException(
                "Maximum photo size must be positive",
                config_key=f"{prefix}MAX_PHOTO_SIZE",
                config_value=str(max_photo_size),
            )

        return cls(
            database_url=env.get_str(f"{prefix}DATABASE_URL", defaults.database_url),
            photo_upload_dir=env.get_str(
                f"{prefix}PHOTO_UPLOAD_DIR", defaults.photo_upload_dir
            ),
            max_photo_size=max_photo_size,
            log_level=log_level,
            echo_sql=env.get_bool(f"{prefix}ECHO_SQL", defaults.echo_sql),
        )


def _level_name(level: Union[str, LogLevel]) -> str:
    return level.value if isinstance(level, LogLevel) else level


class LoggingConfigurator:
    """Helpers that configure the ``logging`` module."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Call ``logging.basicConfig`` with the package defaults.

        Args:
            level: Root log level
            format_string: Record format, ``DEFAULT_FORMAT`` if omitted
            log_file: Append to this file instead of writing to stderr
        """
        options: Dict[str, Any] = {
            "level": _level_name(level),
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
        if log_file:
            options.update(filename=log_file, filemode="a")
        logging.basicConfig(**options)

    @staticmethod
    def configure_structured_logging(
        config_dict: Optional[Dict[str, Any]] = None, config_file: Optional[str] = None
    ) -> None:
        """
        Apply a logging config file or dictConfig mapping.

        An existing ``config_file`` wins over ``config_dict``; with neither,
        ``default_config()`` is applied.
        """
        if config_file and Path(config_file).exists():
            logging.config.fileConfig(config_file)
            return
        logging.config.dictConfig(config_dict or LoggingConfigurator.default_config())

    @staticmethod
    def configure_from_settings(settings: PetClinicSettings) -> None:
        """Apply ``default_config()`` at the configured log level."""
        logging.config.dictConfig(
            LoggingConfigurator.default_config(settings.log_level)
        )

    @staticmethod
    def default_config(level: Union[str, LogLevel] = LogLevel.INFO) -> Dict[str, Any]:
        """dictConfig mapping that sends ``petclinic_core`` records to stdout."""
        level = _level_name(level)
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": LoggingConfigurator.DEFAULT_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                "petclinic_core": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                }
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }
