"""
Async engine construction.

Supports PostgreSQL through asyncpg and SQLite through aiosqlite. Plain
``postgresql://`` and ``sqlite://`` URLs are rewritten to their async
drivers.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool

from ..exceptions import ConfigurationException

logger = logging.getLogger(__name__)

ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


class DatabaseConfig:
    """
    Validated database URL plus connection pool settings.

    Raises:
        ConfigurationException: If the URL is empty, uses an unsupported
            backend, or is a PostgreSQL URL without host or database name
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.echo = echo

        self._check_url()

    @property
    def scheme(self) -> str:
        return urlparse(self.database_url).scheme

    @property
    def backend(self) -> str:
        """Scheme without the ``+driver`` suffix."""
        return self.scheme.split("+", 1)[0]

    @property
    def is_sqlite(self) -> bool:
        return self.backend == "sqlite"

    def _check_url(self) -> None:
        if not self.database_url:
            raise ConfigurationException("Database URL cannot be empty")

        if self.backend not in ASYNC_DRIVERS:
            raise ConfigurationException(
                "Database URL must use postgresql:// or sqlite://",
                config_key="database_url",
                config_value=self.scheme,
            )

        if self.is_sqlite:
            return
        parsed = urlparse(self.database_url)
        if not parsed.hostname:
            raise ConfigurationException("Database URL must include hostname")
        if parsed.path in ("", "/"):
            raise ConfigurationException("Database URL must include database name")

    def get_async_url(self) -> str:
        """The URL with its async driver filled in."""
        if self.scheme != self.backend:
            return self.database_url
        return ASYNC_DRIVERS[self.backend] + self.database_url[len(self.scheme):]


def create_engine(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: int = 30,
    pool_recycle: int = 3600,
    pool_pre_ping: bool = True,
    echo: bool = False,
    use_null_pool: bool = False,
    connect_args: Optional[dict] = None,
) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    SQLite engines, and any engine created with ``use_null_pool``, open a
    fresh connection per checkout; the pool arguments only affect
    PostgreSQL.

    Raises:
        ConfigurationException: If the URL is rejected by DatabaseConfig
    """
    config = DatabaseConfig(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_recycle=pool_recycle,
        echo=echo,
    )

    options: Dict[str, Any] = {"echo": config.echo}
    if connect_args:
        options["connect_args"] = connect_args

    if use_null_pool or config.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            poolclass=AsyncAdaptedQueuePool,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            pool_recycle=config.pool_recycle,
            pool_pre_ping=pool_pre_ping,
        )

    engine = create_async_engine(config.get_async_url(), **options)
    logger.info(f"Created async database engine for {config.backend}")
    return engine


async def check_connection(engine: AsyncEngine) -> bool:
    """Return True if the database answers ``SELECT 1``."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
    return True
