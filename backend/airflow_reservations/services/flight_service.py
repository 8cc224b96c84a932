"""
Flight registration and lookup.

Registration enforces two rules the generic repository does not: a flight
code may be registered only once, and departure must be strictly before
arrival. The duplicate check and the insert run in the same transaction.
"""

import logging
from typing import List

from ..database.config import DatabaseConfig
from ..exceptions import DuplicateFlightCodeError, InvalidScheduleError
from ..models.flight import FlightModel
from ..repositories.flight import FlightRepository

logger = logging.getLogger(__name__)


class FlightService:
    """
    Service wrapping FlightRepository with the registration rules.

    Each method opens its own unit of work on the given database.
    """

    def __init__(self, database: DatabaseConfig):
        """
        Initialize flight service.

        Args:
            database: DatabaseConfig providing transactional sessions
        """
        self.database = database

    def register_flight(self, flight: FlightModel) -> FlightModel:
        """
        Validate and store a new flight.

        Args:
            flight: Flight to register; its id is ignored

        Returns:
            The stored flight with its generated id

        Raises:
            DuplicateFlightCodeError: If a flight with the same code exists
            InvalidScheduleError: If departure is missing or not before arrival
        """
        with self.database.get_session_context() as session:
            flights = FlightRepository(session)
            if flights.get_by_code(flight.code):
                logger.warning(f"Rejected flight {flight.code}: code already registered")
                raise DuplicateFlightCodeError(flight.code)
            self._check_schedule(flight)
            created = flights.create(flight)

        logger.info(f"Registered flight {created.code} as {created.id}")
        return created

    @staticmethod
    def _check_schedule(flight: FlightModel) -> None:
        if flight.departure_time is None or flight.arrival_time is None:
            raise InvalidScheduleError("Departure and arrival times are required")
        if flight.departure_time >= flight.arrival_time:
            raise InvalidScheduleError(
                f"Departure {flight.departure_time.isoformat()} is not before "
                f"arrival {flight.arrival_time.isoformat()}"
            )

    def exists_flight_with_code(self, code: str) -> bool:
        with self.database.get_session_context() as session:
            return bool(FlightRepository(session).get_by_code(code))

    def get_all_flights(self) -> List[FlightModel]:
        with self.database.get_session_context() as session:
            return FlightRepository(session).get_all()

    def get_flight_by_id(self, flight_id: int) -> FlightModel:
        """Raises NotFoundError when the flight does not exist."""
        with self.database.get_session_context() as session:
            return FlightRepository(session).get_by_id(flight_id)

    def get_flights_by_origin(self, city_id: int) -> List[FlightModel]:
        with self.database.get_session_context() as session:
            return FlightRepository(session).get_by_origin_city(city_id)

    def get_flights_by_destination(self, city_id: int) -> List[FlightModel]:
        with self.database.get_session_context() as session:
            return FlightRepository(session).get_by_destination_city(city_id)

    def update_flight(self, flight_id: int, flight: FlightModel) -> bool:
        with self.database.get_session_context() as session:
            return FlightRepository(session).update(flight_id, flight)

    def delete_flight(self, flight_id: int) -> bool:
        with self.database.get_session_context() as session:
            return FlightRepository(session).delete(flight_id)
