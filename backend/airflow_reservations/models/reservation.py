"""
Reservation Pydantic models for the reservation data layer.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class ReservationModel(BaseModel):
    """Reservation of a flight by a user."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    user_id: Optional[int] = Field(default=None, description="Reserving user ID")
    status_id: Optional[int] = Field(default=None, description="reservations_status ID")
    flight_id: Optional[int] = Field(default=None, description="Reserved flight ID")
    reserved_at: datetime = Field(default_factory=datetime.now, description="Reservation time")


class ReservationDetailsModel(ReservationModel):
    """
    Reservation joined with its status name and description.

    Every reservation read path returns this shape; writes take the plain
    ReservationModel.
    """

    status_name: Optional[str] = None
    status_description: Optional[str] = None

    def to_reservation(self) -> ReservationModel:
        """Drop the joined fields, keeping the persisted shape."""
        return ReservationModel(**self.model_dump(exclude={"status_name", "status_description"}))
