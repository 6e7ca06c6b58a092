"""
User repository for account lookups and sign-up.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for the users table."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Get a single user given their email.

        The comparison is exact; case sensitivity follows the store's collation.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("email", email)

    async def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Get a single user given their id.

        Args:
            user_id: Primary key of the user

        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("id", user_id)

    async def add_user(self, user_in: UserCreate) -> User:
        """
        Add a new user.

        Args:
            user_in: Name, email and password of the new user

        Returns:
            The stored user, including its generated id

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already taken
        """
        user = await self.insert_returning({
            "name": user_in.name,
            "email": user_in.email,
            "password": user_in.password,
        })
        logger.info(f"Created user: {user.email} (ID: {user.id})")
        return user
