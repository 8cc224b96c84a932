"""
User Pydantic model for the reservation data layer.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class UserModel(BaseModel):
    """
    Registered user.

    The password field always carries a bcrypt hash once stored; hashing
    happens in the user service, never in the repository.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    name: str = Field(default="", max_length=40, description="First name")
    last_name: str = Field(default="", max_length=40, description="Last name")
    email: str = Field(default="", max_length=200, description="Unique email address")
    password: str = Field(default="", max_length=100, description="Hashed credential")
    is_super_user: bool = Field(default=False, description="Administrator flag")
    created_at: datetime = Field(default_factory=datetime.now, description="Registration time")
