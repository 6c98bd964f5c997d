"""
Utility functions and helper modules.

This module provides configuration management and logging setup shared
by the rest of the package.
"""

from .config import (
    MAX_PHOTO_SIZE,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
    PetClinicSettings,
)

__all__ = [
    "MAX_PHOTO_SIZE",
    "LogLevel",
    "EnvironmentConfig",
    "PetClinicSettings",
    "LoggingConfigurator",
]
