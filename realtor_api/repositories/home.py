"""
Home repository for listing queries with field selection and filtering.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import load_only, selectinload
from realtor_api.repositories.base import BaseRepository
from realtor_api.models import Home
from typing import Optional, List, Dict, Any, Sequence
import logging

logger = logging.getLogger(__name__)


class HomeRepository(BaseRepository[Home]):
    """Repository for home listings."""

    def __init__(self, db: AsyncSession):
        super().__init__(Home, db)

    async def find_many(
        self,
        where: Optional[Dict[str, Any]] = None,
        select_fields: Sequence[str] = (),
        images_take: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find homes matching a filter and return only the selected fields.

        Args:
            where: Filter dictionary, e.g. ``{"city": "Toronto", "price": {"lte": 5000}}``
            select_fields: Column names to return for every home
            images_take: How many image urls to attach per home; ``None`` attaches all

        Returns:
            One dictionary per home with the selected fields plus ``images``,
            a list of ``{"url": ...}`` dictionaries ordered by image id
        """
        try:
            fields = list(select_fields) or [column.key for column in Home.__table__.columns]
            for field in fields:
                if field not in Home.__table__.columns:
                    raise ValueError(f"Field '{field}' does not exist on Home")

            columns = [getattr(Home, field) for field in dict.fromkeys(["id", *fields])]
            query = (
                select(Home)
                .options(load_only(*columns), selectinload(Home.images))
                .where(*self.build_conditions(where))
                .order_by(Home.id)
                .execution_options(populate_existing=True)
            )

            result = await self.db.execute(query)
            homes = result.scalars().all()

            rows = []
            for home in homes:
                images = home.images if images_take is None else home.images[:images_take]
                row = {field: getattr(home, field) for field in fields}
                row["images"] = [{"url": image.url} for image in images]
                rows.append(row)

            logger.debug(f"Home query returned {len(rows)} results")
            return rows
        except Exception as e:
            logger.error(f"Failed to find homes: {e}")
            raise

    async def get_home_with_details(self, home_id: int) -> Optional[Home]:
        """
        Get a home with its images and realtor loaded.

        Args:
            home_id: Primary key of the home

        Returns:
            Home with loaded relationships or None if not found
        """
        try:
            query = (
                select(Home)
                .options(
                    selectinload(Home.images),
                    selectinload(Home.realtor),
                )
                .where(Home.id == home_id)
                .execution_options(populate_existing=True)
            )

            result = await self.db.execute(query)
            home = result.scalar_one_or_none()

            if home:
                logger.debug(f"Retrieved home with details: {home_id}")

            return home
        except Exception as e:
            logger.error(f"Failed to get home with details {home_id}: {e}")
            raise
