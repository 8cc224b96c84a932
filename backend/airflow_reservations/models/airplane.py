"""
Airplane Pydantic model for the reservation data layer.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AirplaneModel(BaseModel):
    """Airplane operated by an airline; owns its seats."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    airline: str = Field(default="", max_length=20, description="Operating airline")
    model: str = Field(default="", max_length=50, description="Aircraft model")
    code: str = Field(default="", max_length=10, description="Registration code")
    capacity: Optional[int] = Field(default=None, gt=0, description="Passenger capacity")
    year: Optional[int] = Field(default=None, ge=1901, le=2155, description="Year of manufacture")
