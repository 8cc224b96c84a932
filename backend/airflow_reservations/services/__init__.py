"""
Business rules layered over the repositories.

Each service method runs as one unit of work: it commits on success and rolls
back everything on failure.
"""

from .flight_service import FlightService
from .reservation_service import ReservationService
from .user_service import UserService

__all__ = [
    'FlightService',
    'ReservationService',
    'UserService',
]
