"""Database Connection Manager: async engine with pooling, error mapping, and health checks.

Invariants:
    - One engine (and pool) per process, shared by every request
    - Every unit of work runs in engine.begin(): committed on success, rolled back on error
    - All driver and SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - pool_pre_ping replaces connections the server dropped after startup

Design Decisions:
    - Built once in the FastAPI lifespan and injected, never a module global
    - connect_args carries the asyncpg connect/command timeout from settings
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from values_service.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and hands out transactional connections."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        connect_args: dict | None = None,
    ):
        self.connect_args = dict(connect_args or {})
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=self.connect_args,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.connect_args = {}
        manager.engine = engine
        return manager

    @asynccontextmanager
    async def connection(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncConnection, None]:
        """Provide a transactional connection with error mapping."""
        try:
            async with self.engine.begin() as conn:
                yield conn
        except OperationalError as e:
            logger.error(
                f"DB operational error: {e}", extra={"operation": operation},
            )
            raise DatabaseError(
                "Connection or operational error", operation,
            ) from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"operation": operation})
            raise DatabaseError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
            raise DatabaseError("Database operation failed", operation) from e
        except (OSError, asyncio.TimeoutError) as e:
            logger.error(
                f"Lost database connection: {e}", extra={"operation": operation},
            )
            raise DatabaseError("Database unreachable", operation) from e

    async def ping(self) -> None:
        """Run a trivial liveness query; raises DatabaseError when unreachable."""
        async with self.connection("ping") as conn:
            await conn.execute(text("SELECT 1"))

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.ping()
            return True
        except DatabaseError:
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
