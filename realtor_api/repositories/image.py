"""
Repository for Image model operations.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from realtor_api.models import Image
from realtor_api.repositories.base import BaseRepository


class ImageRepository(BaseRepository[Image]):
    """Repository for Image database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(Image, db)

    async def get_by_home_id(self, home_id: int) -> List[Image]:
        """
        Get all images for a home, oldest first.

        Args:
            home_id: ID of the home

        Returns:
            List of images
        """
        query = select(Image).where(Image.home_id == home_id).order_by(Image.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def delete_by_home_id(self, home_id: int) -> int:
        """Delete every image of a home and return how many were removed."""
        return await self.delete_where({"home_id": home_id})
