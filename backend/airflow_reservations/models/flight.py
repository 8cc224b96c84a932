"""
Flight Pydantic models for the reservation data layer.

FlightModel is the persisted shape of a flights row. FlightDetailsModel is the
joined read model carrying the status name and description from flight_status.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class FlightModel(BaseModel):
    """
    Scheduled flight between two cities.

    The departure-before-arrival rule is checked by the flight service on
    registration and by a schema constraint on every write.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    airplane_id: Optional[int] = Field(default=None, description="Operating airplane ID")
    status_id: Optional[int] = Field(default=None, description="flight_status ID")
    origin_city_id: Optional[int] = Field(default=None, description="Origin city ID")
    destination_city_id: Optional[int] = Field(default=None, description="Destination city ID")
    code: str = Field(default="", max_length=10, description="Flight code (e.g., 'AV202')")
    departure_time: Optional[datetime] = Field(default=None, description="Scheduled departure")
    arrival_time: Optional[datetime] = Field(default=None, description="Scheduled arrival")
    price_base: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Base fare"
    )


class FlightDetailsModel(FlightModel):
    """Flight joined with its status name and description."""

    status_name: Optional[str] = None
    status_description: Optional[str] = None

    def to_flight(self) -> FlightModel:
        """Drop the joined fields, keeping the persisted shape."""
        return FlightModel(**self.model_dump(exclude={"status_name", "status_description"}))
