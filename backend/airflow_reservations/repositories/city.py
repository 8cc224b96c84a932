"""City repository."""

from typing import Any, Dict, Optional

from sqlalchemy.engine import Row

from ..database.models import City
from ..models.city import CityModel
from .base import Repository


class CityRepository(Repository[CityModel]):
    table = City
    entity_name = "city"

    def _to_record(self, row: Row) -> CityModel:
        city = row[0]
        return CityModel(id=city.id, name=city.name, country=city.country, code=city.code)

    def _to_values(self, record: CityModel) -> Dict[str, Any]:
        return {"name": record.name, "country": record.country, "code": record.code}

    def get_by_name(self, name: str) -> Optional[CityModel]:
        """Return the first city with exactly this name, or None."""
        return self._fetch_one(self._select().where(City.name == name).order_by(City.id))
