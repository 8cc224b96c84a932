"""
Seat Pydantic model for the reservation data layer.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .enums import SeatClass


class SeatModel(BaseModel):
    """
    Seat on an airplane.

    A seat belongs to exactly one airplane. ``reservation_id`` is None while
    the seat is free and points at the holding reservation otherwise.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    airplane_id: Optional[int] = Field(default=None, description="Owning airplane ID")
    reservation_id: Optional[int] = Field(default=None, description="Holding reservation ID, None when free")
    seat_number: str = Field(default="", max_length=10, description="Seat number (e.g., '12A')")
    seat_class: SeatClass = Field(default=SeatClass.ECONOMY, description="Seat class")
    is_window: Optional[bool] = Field(default=None, description="Window seat flag")

    @property
    def is_available(self) -> bool:
        return self.reservation_id is None
