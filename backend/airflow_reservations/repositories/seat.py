"""Seat repository."""

import logging
from typing import Any, Dict, List

from sqlalchemy import select, update
from sqlalchemy.engine import Row

from ..database.models import Flight, Reservation, Seat
from ..models.enums import SeatClass
from ..models.seat import SeatModel
from .base import Repository

logger = logging.getLogger(__name__)


class SeatRepository(Repository[SeatModel]):
    table = Seat
    entity_name = "seat"

    def _to_record(self, row: Row) -> SeatModel:
        seat = row[0]
        return SeatModel(
            id=seat.id,
            airplane_id=seat.airplane_id,
            reservation_id=seat.reservation_id,
            seat_number=seat.seat_number,
            seat_class=SeatClass.from_column(seat.seat_class),
            is_window=seat.is_window,
        )

    def _to_values(self, record: SeatModel) -> Dict[str, Any]:
        return {
            "airplane_id": record.airplane_id,
            "reservation_id": record.reservation_id,
            "seat_number": record.seat_number,
            "seat_class": record.seat_class.value,
            "is_window": record.is_window,
        }

    def get_by_airplane_id(self, airplane_id: int) -> List[SeatModel]:
        """All seats of this airplane."""
        return self._fetch_all(self._select().where(Seat.airplane_id == airplane_id).order_by(Seat.id))

    def get_by_reservation_id(self, reservation_id: int) -> List[SeatModel]:
        """Seats linked to this reservation."""
        return self._fetch_all(self._select().where(Seat.reservation_id == reservation_id).order_by(Seat.id))

    def get_available_seats_by_airplane_id(self, airplane_id: int) -> List[SeatModel]:
        """Seats of this airplane not linked to any reservation."""
        return self._fetch_all(
            self._select().where(Seat.airplane_id == airplane_id, Seat.reservation_id.is_(None))
            .order_by(Seat.id)
        )

    def assign_reservation(self, seat_id: int, reservation_id: int) -> bool:
        """
        Link a free seat to a reservation.

        The statement only matches while the seat is still free and the
        reservation's flight is operated by the seat's airplane, so two
        bookings can never both claim it and a seat never points at a
        reservation on another airplane.

        Returns:
            True if the seat was linked; False if it does not exist, is taken
            or belongs to another airplane
        """
        same_airplane = (
            select(Reservation.id)
            .join(Flight, Flight.id == Reservation.flight_id)
            .where(Reservation.id == reservation_id, Flight.airplane_id == Seat.airplane_id)
            .correlate(Seat)
            .exists()
        )
        result = self.session.execute(
            update(Seat)
            .where(Seat.id == seat_id, Seat.reservation_id.is_(None), same_airplane)
            .values(reservation_id=reservation_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def release_by_reservation_id(self, reservation_id: int) -> int:
        """
        Unlink every seat held by a reservation.

        Returns:
            Number of seats released
        """
        result = self.session.execute(
            update(Seat)
            .where(Seat.reservation_id == reservation_id)
            .values(reservation_id=None)
        )
        logger.debug(f"Released {result.rowcount} seat(s) of reservation {reservation_id}")
        return result.rowcount
