"""
Repositories: one per table, all implementing the generic Repository contract.
"""

from .base import Repository
from .airplane import AirplaneRepository
from .city import CityRepository
from .flight import FlightRepository
from .reservation import ReservationRepository
from .seat import SeatRepository
from .status import FlightStatusRepository, ReservationStatusRepository
from .user import UserRepository

__all__ = [
    "Repository",
    "AirplaneRepository",
    "CityRepository",
    "FlightRepository",
    "FlightStatusRepository",
    "ReservationRepository",
    "ReservationStatusRepository",
    "SeatRepository",
    "UserRepository",
]
