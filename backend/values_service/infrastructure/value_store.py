"""Durable Store Adapter: appends and lists Request Records in the values table.

Invariants:
    - record_request inserts exactly one row; nothing is ever updated or deleted
    - list_all returns rows in store-native order as [{"number": int}, ...]
    - ensure_schema is idempotent (create table only if absent)
    - Failures surface as DatabaseError; callers decide whether to swallow them
"""

import logging

from sqlalchemy import insert, select

from values_service.db.base import Base
from values_service.infrastructure.database import DatabaseSessionManager
from values_service.models.value import values_table

logger = logging.getLogger(__name__)


class SqlValueStore:
    """ValueStore backed by a SQLAlchemy async engine."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def ping(self) -> None:
        await self._db.ping()

    async def ensure_schema(self) -> None:
        async with self._db.connection("create_table") as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        logger.info("Values table ready")

    async def record_request(self, index: int) -> None:
        async with self._db.connection("insert") as conn:
            await conn.execute(insert(values_table).values(number=index))

    async def list_all(self) -> list[dict]:
        async with self._db.connection("select") as conn:
            result = await conn.execute(select(values_table.c.number))
            return [{"number": row.number} for row in result]
