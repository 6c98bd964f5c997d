"""
Async session handling for the repositories.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import MetaData
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..exceptions import DatabaseException, TransactionException
from ..utils.config import PetClinicSettings
from .connection import create_engine

logger = logging.getLogger(__name__)

DEFAULT_SESSION_OPTIONS: Dict[str, Any] = {
    # aggregates are used after commit, so loaded state must survive it
    "expire_on_commit": False,
    "autoflush": True,
}


class SessionManager:
    """
    Hands out sessions bound to one engine.

    Example:
        manager = SessionManager.from_settings(PetClinicSettings.from_environment())
        async with manager.get_transaction() as session:
            await OwnerRepository(session).save(owner)
    """

    def __init__(
        self, engine: AsyncEngine, session_config: Optional[Dict[str, Any]] = None
    ):
        self.engine = engine
        options = {**DEFAULT_SESSION_OPTIONS, **(session_config or {})}
        self.session_factory = async_sessionmaker(
            bind=engine, class_=AsyncSession, **options
        )

    @classmethod
    def from_settings(cls, settings: PetClinicSettings) -> "SessionManager":
        """Session manager over a new engine for the configured database."""
        return cls(create_engine(settings.database_url, echo=settings.echo_sql))

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that is rolled back on error and always closed."""
        session = self.session_factory()
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Session error, rolling back: {e}")
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def get_transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Session inside a transaction committed when the block exits cleanly.

        Raises:
            TransactionException: If SQLAlchemy fails inside the block or on
                commit; other exceptions propagate after the rollback
        """
        async with self.get_session() as session:
            try:
                async with session.begin():
                    yield session
            except SQLAlchemyError as e:
                raise TransactionException(original_error=e) from e

    async def initialize_database(self, metadata: MetaData) -> None:
        """
        Create every table in ``metadata`` that does not exist yet.

        Raises:
            DatabaseException: If the schema cannot be created
        """
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        except SQLAlchemyError as e:
            raise DatabaseException(
                "Database initialization failed",
                error_code="DATABASE_INIT_ERROR",
                original_error=e,
            ) from e
        logger.info("Database tables created")

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
