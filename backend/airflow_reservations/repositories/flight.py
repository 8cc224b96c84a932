"""
Flight repository.

Plain read paths return FlightModel. ``get_details_by_id`` and
``get_all_details`` join flight_status and return FlightDetailsModel.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.engine import Row

from ..database.models import Flight, FlightStatus
from ..exceptions import NotFoundError
from ..models.flight import FlightDetailsModel, FlightModel
from .base import Repository


def _flight_fields(flight: Flight) -> Dict[str, Any]:
    return {
        "id": flight.id,
        "airplane_id": flight.airplane_id,
        "status_id": flight.status_id,
        "origin_city_id": flight.origin_city_id,
        "destination_city_id": flight.destination_city_id,
        "code": flight.code,
        "departure_time": flight.departure_time,
        "arrival_time": flight.arrival_time,
        "price_base": flight.price_base,
    }


class FlightRepository(Repository[FlightModel]):
    table = Flight
    entity_name = "flight"

    def _to_record(self, row: Row) -> FlightModel:
        return FlightModel(**_flight_fields(row[0]))

    def _to_values(self, record: FlightModel) -> Dict[str, Any]:
        return {
            "airplane_id": record.airplane_id,
            "status_id": record.status_id,
            "origin_city_id": record.origin_city_id,
            "destination_city_id": record.destination_city_id,
            "code": record.code,
            "departure_time": record.departure_time,
            "arrival_time": record.arrival_time,
            "price_base": record.price_base,
        }

    def _created(self, record: FlightModel, new_id: Any) -> FlightModel:
        if isinstance(record, FlightDetailsModel):
            record = record.to_flight()
        return record.model_copy(update={"id": new_id})

    def get_by_origin_city(self, city_id: int) -> List[FlightModel]:
        """Flights departing from this city."""
        return self._fetch_all(self._select().where(Flight.origin_city_id == city_id))

    def get_by_destination_city(self, city_id: int) -> List[FlightModel]:
        """Flights arriving at this city."""
        return self._fetch_all(self._select().where(Flight.destination_city_id == city_id))

    def get_by_code(self, code: str) -> List[FlightModel]:
        """Flights registered under this code (used for the uniqueness check)."""
        return self._fetch_all(self._select().where(Flight.code == code))

    # Joined read model

    def _details_select(self) -> Select:
        return select(
            Flight,
            FlightStatus.name.label("status_name"),
            FlightStatus.description.label("status_description"),
        ).join(FlightStatus, Flight.status_id == FlightStatus.id)

    def _to_details(self, row: Row) -> FlightDetailsModel:
        return FlightDetailsModel(
            **_flight_fields(row[0]),
            status_name=row.status_name,
            status_description=row.status_description,
        )

    def get_all_details(self) -> List[FlightDetailsModel]:
        """Every flight with its status name and description."""
        return [self._to_details(row) for row in self._execute(self._details_select().order_by(Flight.id))]

    def get_details_by_id(self, flight_id: int) -> FlightDetailsModel:
        """
        One flight with its status name and description.

        Raises:
            NotFoundError: If no flight has this identifier
        """
        row = self._execute(self._details_select().where(Flight.id == flight_id)).first()
        if row is None:
            raise NotFoundError(self.entity_name, flight_id)
        return self._to_details(row)
