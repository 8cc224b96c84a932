"""
Reservation repository.

Every read path joins reservations_status and returns ReservationDetailsModel
with the status name and description attached. Writes take ReservationModel;
joined fields passed in are ignored.
"""

from typing import Any, Dict, List

from sqlalchemy import Select, select
from sqlalchemy.engine import Row

from ..database.models import Reservation, ReservationStatus
from ..models.reservation import ReservationDetailsModel, ReservationModel
from .base import Repository


class ReservationRepository(Repository[ReservationDetailsModel]):
    table = Reservation
    entity_name = "reservation"

    def _select(self) -> Select:
        return select(
            Reservation,
            ReservationStatus.name.label("status_name"),
            ReservationStatus.description.label("status_description"),
        ).join(ReservationStatus, Reservation.status_id == ReservationStatus.id)

    def _to_record(self, row: Row) -> ReservationDetailsModel:
        reservation = row[0]
        return ReservationDetailsModel(
            id=reservation.id,
            user_id=reservation.user_id,
            status_id=reservation.status_id,
            flight_id=reservation.flight_id,
            reserved_at=reservation.reserved_at,
            status_name=row.status_name,
            status_description=row.status_description,
        )

    def _to_values(self, record: ReservationModel) -> Dict[str, Any]:
        return {
            "user_id": record.user_id,
            "status_id": record.status_id,
            "flight_id": record.flight_id,
            "reserved_at": record.reserved_at,
        }

    def _created(self, record: ReservationModel, new_id: Any) -> ReservationModel:
        if isinstance(record, ReservationDetailsModel):
            record = record.to_reservation()
        return record.model_copy(update={"id": new_id})

    def get_by_user_id(self, user_id: int) -> List[ReservationDetailsModel]:
        """Reservations made by this user."""
        return self._fetch_all(self._select().where(Reservation.user_id == user_id))

    def get_by_flight_id(self, flight_id: int) -> List[ReservationDetailsModel]:
        """Reservations on this flight."""
        return self._fetch_all(self._select().where(Reservation.flight_id == flight_id))
