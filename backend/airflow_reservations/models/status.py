"""
Status lookup Pydantic models.

Both lookup tables share the same shape; their identifiers are assigned by the
reference dataset rather than generated by the database.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class StatusModel(BaseModel):
    """Row of a fixed-vocabulary status table."""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(default=0, description="Status identifier from the reference dataset")
    name: str = Field(default="", max_length=15, description="Status name (e.g., 'SCHEDULED')")
    description: Optional[str] = Field(default=None, max_length=100, description="Human readable description")


class FlightStatusModel(StatusModel):
    """Row of the flight_status table."""


class ReservationStatusModel(StatusModel):
    """Row of the reservations_status table."""
