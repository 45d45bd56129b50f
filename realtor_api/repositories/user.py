"""
User repository for realtor lookups and account creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from realtor_api.repositories.base import BaseRepository
from realtor_api.models import User
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user accounts."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user with a validated email address.

        Args:
            user_data: Dictionary containing user information

        Returns:
            Created user instance

        Raises:
            ValueError: If the email is invalid
        """
        data = dict(user_data)
        data["email"] = User.validate_email_format(data.get("email"))

        user = await self.create(data)
        logger.info(f"Created user: {user.email} (ID: {user.id})")
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address."""
        try:
            result = await self.db.execute(select(User).where(User.email == email.lower()))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {e}")
            raise
