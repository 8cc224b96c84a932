"""
Reservation booking and cancellation.

A booking creates the reservation row and links the chosen seats to it in
one transaction: if any seat is missing, belongs to another airplane or is
already taken, nothing is written.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..database.config import DatabaseConfig
from ..exceptions import NotFoundError, SeatAssignmentError, SeatUnavailableError
from ..models.enums import ReservationStatusCode
from ..models.reservation import ReservationDetailsModel, ReservationModel
from ..models.seat import SeatModel
from ..repositories.flight import FlightRepository
from ..repositories.reservation import ReservationRepository
from ..repositories.seat import SeatRepository

logger = logging.getLogger(__name__)


class ReservationService:
    """Multi-step reservation workflows over the repositories."""

    def __init__(self, database: DatabaseConfig):
        self.database = database

    def book(
        self,
        user_id: int,
        flight_id: int,
        seat_ids: Iterable[int],
        status_id: int = ReservationStatusCode.CONFIRMED,
        reserved_at: Optional[datetime] = None,
    ) -> ReservationDetailsModel:
        """
        Reserve seats on a flight for a user.

        Args:
            user_id: Reserving user
            flight_id: Flight to reserve
            seat_ids: Seats of the flight's airplane to link; duplicates are ignored
            status_id: Initial reservation status
            reserved_at: Reservation time; defaults to now

        Returns:
            The stored reservation with its status name and description

        Raises:
            NotFoundError: If the flight or a seat does not exist
            SeatAssignmentError: If a seat belongs to another airplane
            SeatUnavailableError: If a seat is already linked to a reservation
        """
        # a seat listed twice is linked once
        seat_ids = list(dict.fromkeys(seat_ids))
        with self.database.get_session_context() as session:
            flight = FlightRepository(session).get_by_id(flight_id)
            seats = SeatRepository(session)
            reservations = ReservationRepository(session)

            for seat_id in seat_ids:
                seat = seats.get_by_id(seat_id)
                if seat.airplane_id != flight.airplane_id:
                    raise SeatAssignmentError(
                        f"Seat {seat.seat_number} belongs to airplane {seat.airplane_id}, "
                        f"flight {flight.code} is operated by airplane {flight.airplane_id}"
                    )
                if not seat.is_available:
                    raise SeatUnavailableError(f"Seat {seat.seat_number} is already reserved")

            created = reservations.create(ReservationModel(
                user_id=user_id,
                flight_id=flight_id,
                status_id=int(status_id),
                reserved_at=reserved_at or datetime.now(),
            ))
            for seat_id in seat_ids:
                if not seats.assign_reservation(seat_id, created.id):
                    raise SeatUnavailableError(f"Seat {seat_id} was reserved concurrently")

            booked = reservations.get_by_id(created.id)

        logger.info(
            f"Booked reservation {booked.id} on flight {flight_id} "
            f"for user {user_id} ({len(seat_ids)} seat(s))"
        )
        return booked

    def cancel(self, reservation_id: int) -> ReservationDetailsModel:
        """
        Mark a reservation CANCELLED and free its seats.

        Raises:
            NotFoundError: If the reservation does not exist
        """
        with self.database.get_session_context() as session:
            reservations = ReservationRepository(session)
            reservation = reservations.get_by_id(reservation_id).to_reservation()
            reservation.status_id = int(ReservationStatusCode.CANCELLED)
            reservations.update(reservation_id, reservation)
            released = SeatRepository(session).release_by_reservation_id(reservation_id)
            cancelled = reservations.get_by_id(reservation_id)

        logger.info(f"Cancelled reservation {reservation_id}, released {released} seat(s)")
        return cancelled

    def get_reservations_for_user(self, user_id: int) -> List[ReservationDetailsModel]:
        with self.database.get_session_context() as session:
            return ReservationRepository(session).get_by_user_id(user_id)

    def get_seats_for_reservation(self, reservation_id: int) -> List[SeatModel]:
        """Seats currently linked to the reservation; raises NotFoundError if it does not exist."""
        with self.database.get_session_context() as session:
            ReservationRepository(session).get_by_id(reservation_id)
            return SeatRepository(session).get_by_reservation_id(reservation_id)
