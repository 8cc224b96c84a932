"""
City Pydantic model for the reservation data layer.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class CityModel(BaseModel):
    """City served by flights, identified by its airport code."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    name: str = Field(default="", max_length=100, description="City name")
    country: str = Field(default="", max_length=100, description="Country name")
    code: str = Field(default="", max_length=10, description="Airport code (e.g., 'BOG')")
