"""
Exception hierarchy for the reservation data layer.

Storage-access failures (connection errors, constraint violations) are not
wrapped: they surface as ``sqlalchemy.exc.SQLAlchemyError`` subclasses.
"""

from typing import Any


class ReservationsError(Exception):
    """Base class for errors raised by this package."""


class NotFoundError(ReservationsError):
    """Raised when a record looked up by identifier does not exist."""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier!r} not found")


class InvalidInputError(ReservationsError):
    """Raised by the service layer when input breaks a business rule."""


class DuplicateFlightCodeError(InvalidInputError):
    """A flight with the same code is already registered."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"A flight with code {code!r} already exists")


class InvalidScheduleError(InvalidInputError):
    """Departure time is not strictly before arrival time."""


class SeatAssignmentError(InvalidInputError):
    """Seat does not belong to the airplane operating the flight."""


class SeatUnavailableError(InvalidInputError):
    """Seat is already linked to a reservation."""


class DecodingError(ReservationsError):
    """Raised when a stored value cannot be decoded into its Python type."""


__all__ = [
    "ReservationsError",
    "NotFoundError",
    "InvalidInputError",
    "DuplicateFlightCodeError",
    "InvalidScheduleError",
    "SeatAssignmentError",
    "SeatUnavailableError",
    "DecodingError",
]
