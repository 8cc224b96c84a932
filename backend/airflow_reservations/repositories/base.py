"""
Generic repository contract shared by every entity.

A repository is bound to one SQLAlchemy session, i.e. one unit of work opened
with ``DatabaseConfig.get_session_context()``. Repositories never commit: the
surrounding transaction scope does. Each operation runs a single
parameterized statement.

Subclasses provide explicit mapping functions between result rows and
Pydantic records; no reflective mapping is done.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, delete, select, update
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(ABC, Generic[RecordT]):
    """
    Create/read/update/delete for one table.

    Attributes:
        table: Declarative model class of the table
        entity_name: Name used in log lines and NotFoundError
    """

    table: Type[Any]
    entity_name: str = "record"

    def __init__(self, session: Session):
        self.session = session

    # Mapping

    @abstractmethod
    def _to_record(self, row: Row) -> RecordT:
        """Map one row of ``_select()`` to a record."""

    @abstractmethod
    def _to_values(self, record: BaseModel) -> Dict[str, Any]:
        """Map a record to the column values written by create and update."""

    def _create_values(self, record: BaseModel) -> Dict[str, Any]:
        return self._to_values(record)

    def _created(self, record: BaseModel, new_id: Any) -> RecordT:
        return record.model_copy(update={"id": new_id})

    # Statements

    def _select(self) -> Select:
        """Base SELECT for every read path; subclasses add joins here."""
        return select(self.table)

    def _execute(self, stmt: Select):
        # Rows written by UPDATE statements earlier in the same unit of work
        # must not be served from the identity map
        return self.session.execute(stmt.execution_options(populate_existing=True))

    def _fetch_all(self, stmt: Select) -> List[RecordT]:
        return [self._to_record(row) for row in self._execute(stmt)]

    def _fetch_one(self, stmt: Select) -> Optional[RecordT]:
        row = self._execute(stmt).first()
        return self._to_record(row) if row is not None else None

    # Contract

    def get_all(self) -> List[RecordT]:
        """Return every row ordered by identifier; empty list for an empty table."""
        return self._fetch_all(self._select().order_by(self.table.id))

    def find_by_id(self, record_id: int) -> Optional[RecordT]:
        """Return the matching record, or None when no row matches."""
        return self._fetch_one(self._select().where(self.table.id == record_id))

    def get_by_id(self, record_id: int) -> RecordT:
        """
        Return the matching record.

        Raises:
            NotFoundError: If no row has this identifier
        """
        record = self.find_by_id(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    def create(self, record: BaseModel) -> RecordT:
        """
        Insert a new row.

        Returns:
            The input record carrying the generated identifier
        """
        row = self.table(**self._create_values(record))
        self.session.add(row)
        self.session.flush()
        logger.info(f"Created {self.entity_name} {row.id}")
        return self._created(record, row.id)

    def update(self, record_id: int, record: BaseModel) -> bool:
        """
        Overwrite every mutable column of the row with this identifier.

        Returns:
            True if a row was updated; False (no error) if none matched
        """
        result = self.session.execute(
            update(self.table)
            .where(self.table.id == record_id)
            .values(**self._to_values(record))
        )
        logger.debug(f"Updated {self.entity_name} {record_id}: {result.rowcount} row(s)")
        return result.rowcount > 0

    def delete(self, record_id: int) -> bool:
        """
        Remove the row with this identifier.

        Returns:
            True if a row was deleted; False (no error) if none matched
        """
        result = self.session.execute(
            delete(self.table)
            .where(self.table.id == record_id)
        )
        if result.rowcount:
            logger.info(f"Deleted {self.entity_name} {record_id}")
        return result.rowcount > 0
