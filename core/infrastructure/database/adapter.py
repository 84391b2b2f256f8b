"""
Persistence adapter.

Thin async layer over a SQLAlchemy session exposing the three
primitives the repositories are written against:

- ``run``: execute a mutating statement, report last id and row count
- ``get``: fetch at most one row
- ``all``: fetch every matching row

Store failures are raised as domain ``PersistenceError``s. Nothing here
retries; the Unit of Work owns commit and rollback.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from core.domain.exceptions import ConstraintViolationError, PersistenceError


logger = logging.getLogger(__name__)

Row = Dict[str, Any]


@dataclass(frozen=True)
class RunResult:
    """Outcome of a mutating statement."""
    last_id: Optional[int]
    changes: int


class SqlAdapter:
    """Executes statements on one session and normalises the results."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize adapter with database session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def run(self, statement: Executable) -> RunResult:
        """Execute INSERT/UPDATE/DELETE.

        Returns:
            RunResult with the inserted primary key (inserts only)
            and the number of affected rows
        """
        result = await self._execute(statement)
        last_id = None
        if result.is_insert and result.inserted_primary_key:
            last_id = result.inserted_primary_key[0]
        return RunResult(last_id=last_id, changes=result.rowcount)

    async def get(self, statement: Executable) -> Optional[Row]:
        """Fetch the first row as a dict, or None."""
        result = await self._execute(statement)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def all(self, statement: Executable) -> List[Row]:
        """Fetch all rows as dicts."""
        result = await self._execute(statement)
        return [dict(row) for row in result.mappings().all()]

    async def _execute(self, statement: Executable):
        try:
            return await self._session.execute(statement)
        except IntegrityError as e:
            logger.warning(f"Constraint violation: {e.orig}")
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error: {type(e).__name__}: {e}", exc_info=True)
            raise PersistenceError() from e
