"""
Database connection and session management.

This module provides async SQLAlchemy engine configuration and session
management for the clinic repositories.
"""

from .connection import DatabaseConfig, check_connection, create_engine
from .session import SessionManager

__all__ = [
    # Connection utilities
    "DatabaseConfig",
    "create_engine",
    "check_connection",
    # Session management
    "SessionManager",
]
