"""
Versioned reference dataset for the status lookup tables.

The identifiers below are stable: flights and reservations store them as
foreign keys and callers refer to them through FlightStatusCode and
ReservationStatusCode. Bump REFERENCE_DATA_VERSION whenever a row changes.
"""

import logging
from typing import Dict, Tuple, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.enums import FlightStatusCode, ReservationStatusCode
from .models import FlightStatus, ReservationStatus

logger = logging.getLogger(__name__)

REFERENCE_DATA_VERSION = 1

FLIGHT_STATUSES: Tuple[Tuple[int, str, str], ...] = (
    (FlightStatusCode.SCHEDULED, "SCHEDULED", "Flight is scheduled as planned"),
    (FlightStatusCode.DELAYED, "DELAYED", "Flight is delayed"),
    (FlightStatusCode.CANCELLED, "CANCELLED", "Flight has been cancelled"),
    (FlightStatusCode.BOARDING, "BOARDING", "Boarding in progress"),
    (FlightStatusCode.IN_FLIGHT, "IN_FLIGHT", "Flight is currently in the air"),
    (FlightStatusCode.LANDED, "LANDED", "Flight has landed at destination"),
    (FlightStatusCode.COMPLETED, "COMPLETED", "Flight has completed all processes"),
)

RESERVATION_STATUSES: Tuple[Tuple[int, str, str], ...] = (
    (ReservationStatusCode.CONFIRMED, "CONFIRMED", "Reservation is confirmed"),
    (ReservationStatusCode.CANCELLED, "CANCELLED", "Reservation has been cancelled"),
    (ReservationStatusCode.PENDING, "PENDING", "Reservation is pending confirmation"),
    (ReservationStatusCode.CHECKED_IN, "CHECKED_IN", "Passenger has checked in"),
    (ReservationStatusCode.COMPLETED, "COMPLETED", "Travel has been completed"),
)


def _sync_table(session: Session, table: Type, rows: Tuple[Tuple[int, str, str], ...]) -> int:
    existing = {status.id: status for status in session.scalars(select(table))}
    written = 0
    for status_id, name, description in rows:
        current = existing.get(int(status_id))
        if current is None:
            session.add(table(id=int(status_id), name=name, description=description))
            written += 1
        elif (current.name, current.description) != (name, description):
            current.name = name
            current.description = description
            written += 1
    session.flush()
    return written


def load_reference_data(session: Session) -> Dict[str, int]:
    """
    Insert or refresh the status lookup rows.

    Safe to call on every start-up: rows already matching the dataset are
    left untouched. Rows with identifiers outside the dataset are kept.

    Args:
        session: Session inside the caller's transaction scope

    Returns:
        Number of rows written per table
    """
    summary = {
        FlightStatus.__tablename__: _sync_table(session, FlightStatus, FLIGHT_STATUSES),
        ReservationStatus.__tablename__: _sync_table(session, ReservationStatus, RESERVATION_STATUSES),
    }
    logger.info(f"Reference data v{REFERENCE_DATA_VERSION} loaded: {summary}")
    return summary
