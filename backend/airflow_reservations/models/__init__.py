"""
Reservation data layer Pydantic models package.

This package contains the entity records mirroring each table, plus the joined
read models used where status names are denormalized onto a record.
"""

# Enums
from .enums import (
    SeatClass,
    FlightStatusCode,
    ReservationStatusCode,
)

# Entity records
from .user import UserModel
from .airplane import AirplaneModel
from .city import CityModel
from .status import (
    StatusModel,
    FlightStatusModel,
    ReservationStatusModel,
)
from .flight import (
    FlightModel,
    FlightDetailsModel,
)
from .reservation import (
    ReservationModel,
    ReservationDetailsModel,
)
from .seat import SeatModel

__all__ = [
    # Enums
    "SeatClass",
    "FlightStatusCode",
    "ReservationStatusCode",

    # Entity records
    "UserModel",
    "AirplaneModel",
    "CityModel",
    "StatusModel",
    "FlightStatusModel",
    "ReservationStatusModel",
    "FlightModel",
    "FlightDetailsModel",
    "ReservationModel",
    "ReservationDetailsModel",
    "SeatModel",
]
