"""Airplane repository."""

from typing import Any, Dict, Optional

from sqlalchemy.engine import Row

from ..database.models import Airplane
from ..models.airplane import AirplaneModel
from .base import Repository


class AirplaneRepository(Repository[AirplaneModel]):
    table = Airplane
    entity_name = "airplane"

    def _to_record(self, row: Row) -> AirplaneModel:
        airplane = row[0]
        return AirplaneModel(
            id=airplane.id,
            airline=airplane.airline,
            model=airplane.model,
            code=airplane.code,
            capacity=airplane.capacity,
            year=airplane.year,
        )

    def _to_values(self, record: AirplaneModel) -> Dict[str, Any]:
        return {
            "airline": record.airline,
            "model": record.model,
            "code": record.code,
            "capacity": record.capacity,
            "year": record.year,
        }

    def get_by_code(self, code: str) -> Optional[AirplaneModel]:
        """Return the first airplane registered under this code, or None."""
        return self._fetch_one(self._select().where(Airplane.code == code).order_by(Airplane.id))
