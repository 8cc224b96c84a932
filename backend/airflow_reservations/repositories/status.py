"""
Repositories for the two status lookup tables.

Identifiers are not generated: ``create`` writes the id carried by the record,
as the reference dataset does.
"""

from typing import Any, Dict

from pydantic import BaseModel
from sqlalchemy.engine import Row

from ..database.models import FlightStatus, ReservationStatus
from ..models.status import FlightStatusModel, ReservationStatusModel
from .base import Repository


class FlightStatusRepository(Repository[FlightStatusModel]):
    table = FlightStatus
    entity_name = "flight status"

    def _to_record(self, row: Row) -> FlightStatusModel:
        status = row[0]
        return FlightStatusModel(id=status.id, name=status.name, description=status.description)

    def _to_values(self, record: BaseModel) -> Dict[str, Any]:
        return {"name": record.name, "description": record.description}

    def _create_values(self, record: BaseModel) -> Dict[str, Any]:
        return {"id": record.id, **self._to_values(record)}


class ReservationStatusRepository(Repository[ReservationStatusModel]):
    table = ReservationStatus
    entity_name = "reservation status"

    def _to_record(self, row: Row) -> ReservationStatusModel:
        status = row[0]
        return ReservationStatusModel(id=status.id, name=status.name, description=status.description)

    def _to_values(self, record: BaseModel) -> Dict[str, Any]:
        return {"name": record.name, "description": record.description}

    def _create_values(self, record: BaseModel) -> Dict[str, Any]:
        return {"id": record.id, **self._to_values(record)}
