"""Statement executor handed to services in place of a shared connection.

Every value reaches the database as a bound parameter: services build
SQLAlchemy Core statements and never format SQL text themselves.
Writes are committed one statement at a time, so a multi-statement
operation that fails halfway keeps the statements that already ran.
"""

import logging
from typing import Any

from sqlalchemy.sql.expression import Executable
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import StorageError

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_all(self, stmt: Executable) -> list[RowMapping]:
        try:
            result = await self.session.execute(stmt)
            return list(result.mappings().all())
        except SQLAlchemyError as e:
            await self._fail(stmt, e)

    async def scalar(self, stmt: Executable) -> Any:
        try:
            result = await self.session.execute(stmt)
            return result.scalar()
        except SQLAlchemyError as e:
            await self._fail(stmt, e)

    async def execute(self, stmt: Executable) -> int:
        """Run a write, commit it and return the affected row count."""
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            await self._fail(stmt, e)

    async def execute_returning(self, stmt: Executable) -> Any:
        """Run a write with a RETURNING clause, commit it and return the first value."""
        try:
            result = await self.session.execute(stmt)
            value = result.scalar_one()
            await self.session.commit()
            return value
        except SQLAlchemyError as e:
            await self._fail(stmt, e)

    async def _fail(self, stmt: Executable, error: SQLAlchemyError):
        logger.exception(f"Database error while executing: {stmt}")
        await self.session.rollback()
        raise StorageError("Database operation failed") from error
