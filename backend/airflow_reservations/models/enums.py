"""
Enums for the reservation data layer.

Status codes mirror the fixed identifiers of the reference dataset loaded into
the flight_status and reservations_status lookup tables.
"""

from enum import Enum, IntEnum

from ..exceptions import DecodingError


class SeatClass(str, Enum):
    """Aircraft seat class categories, stored by exact name."""
    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"

    @classmethod
    def from_column(cls, value: str) -> "SeatClass":
        """
        Decode a stored seat_class value.

        Matching is exact and case-sensitive; anything outside the closed set
        raises DecodingError instead of falling back to a default.
        """
        try:
            return cls(value)
        except ValueError:
            raise DecodingError(f"Unrecognized seat class {value!r}") from None


class FlightStatusCode(IntEnum):
    """Identifiers of the flight_status reference rows."""
    SCHEDULED = 1
    DELAYED = 2
    CANCELLED = 3
    BOARDING = 4
    IN_FLIGHT = 5
    LANDED = 6
    COMPLETED = 7


class ReservationStatusCode(IntEnum):
    """Identifiers of the reservations_status reference rows."""
    CONFIRMED = 1
    CANCELLED = 2
    PENDING = 3
    CHECKED_IN = 4
    COMPLETED = 5
