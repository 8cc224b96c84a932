"""User repository. Stores the password column as given; hashing is done by UserService."""

from typing import Any, Dict, Optional

from sqlalchemy.engine import Row

from ..database.models import User
from ..models.user import UserModel
from .base import Repository


class UserRepository(Repository[UserModel]):
    table = User
    entity_name = "user"

    def _to_record(self, row: Row) -> UserModel:
        user = row[0]
        return UserModel(
            id=user.id,
            name=user.name,
            last_name=user.last_name,
            email=user.email,
            password=user.password,
            is_super_user=user.is_super_user,
            created_at=user.created_at,
        )

    def _to_values(self, record: UserModel) -> Dict[str, Any]:
        return {
            "name": record.name,
            "last_name": record.last_name,
            "email": record.email,
            "password": record.password,
            "is_super_user": record.is_super_user,
            "created_at": record.created_at,
        }

    def get_by_email(self, email: str) -> Optional[UserModel]:
        """Return the user registered with this email, or None."""
        return self._fetch_one(self._select().where(User.email == email))
