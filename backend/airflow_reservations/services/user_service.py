"""
User registration and credential checks.
"""

import logging
from typing import Optional

from ..database.config import DatabaseConfig
from ..models.user import UserModel
from ..repositories.user import UserRepository
from ..utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Stores users with hashed passwords and authenticates them by email."""

    def __init__(self, database: DatabaseConfig):
        self.database = database

    def register_user(
        self,
        name: str,
        last_name: str,
        email: str,
        password: str,
        is_super_user: bool = False,
    ) -> UserModel:
        """
        Hash the password and store a new user.

        Raises:
            InvalidInputError: If the password is longer than 72 bytes
            sqlalchemy.exc.IntegrityError: If the email is already registered
        """
        user = UserModel(
            name=name,
            last_name=last_name,
            email=email,
            password=hash_password(password),
            is_super_user=is_super_user,
        )
        with self.database.get_session_context() as session:
            created = UserRepository(session).create(user)
        logger.info(f"Registered user {created.id}")
        return created

    def authenticate(self, email: str, password: str) -> Optional[UserModel]:
        """Return the user when the email exists and the password matches, else None."""
        with self.database.get_session_context() as session:
            user = UserRepository(session).get_by_email(email)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Authentication failed for {email}")
            return None
        return user
