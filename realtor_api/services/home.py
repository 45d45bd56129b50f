"""
Home service for querying and managing home listings.
Maps service parameters onto repository calls and repository rows onto responses.
"""

from typing import Optional, List, Dict, Any, Union
from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.repositories.home import HomeRepository
from realtor_api.repositories.image import ImageRepository
from realtor_api.schemas.home import (
    CreateHomeParams,
    UpdateHomeParams,
    HomeFilters,
    HomeResponse,
    HomeDetailResponse,
    RealtorResponse,
)
from realtor_api.utils.exceptions import (
    APIException,
    NotFoundError,
    HomeNotFoundError,
    ValidationError,
    BadRequestError,
)
import logging

logger = logging.getLogger(__name__)

# Fields returned for every home in a listing query
HOME_SELECT = (
    "id",
    "address",
    "city",
    "price",
    "property_type",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class HomeService:
    """
    Home service for listing queries and listing management.
    Repositories do the database work; the service shapes payloads and raises API errors.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.home_repo = HomeRepository(db_session)
        self.image_repo = ImageRepository(db_session)

    async def get_homes(self, filters: Union[HomeFilters, Dict[str, Any], None] = None) -> List[HomeResponse]:
        """
        Get homes matching the filters, each with its first image.

        Args:
            filters: HomeFilters or a repository filter dictionary

        Returns:
            List of homes

        Raises:
            NotFoundError: If no home matches
        """
        if isinstance(filters, HomeFilters):
            where = filters.to_where()
        else:
            where = filters or {}

        try:
            rows = await self.home_repo.find_many(
                where=where,
                select_fields=HOME_SELECT,
                images_take=1,
            )
        except Exception as e:
            logger.error(f"Failed to query homes with filters {where}: {e}")
            raise BadRequestError(f"Failed to query homes: {str(e)}")

        if not rows:
            raise NotFoundError("Homes")

        homes = []
        for row in rows:
            fields = {key: value for key, value in row.items() if key not in ("images", "image")}
            images = row.get("images") or []
            homes.append(HomeResponse(**fields, image=images[0]["url"] if images else None))

        logger.debug(f"Returning {len(homes)} homes")
        return homes

    async def create_home(self, params: CreateHomeParams, realtor_id: int) -> HomeResponse:
        """
        Create a home listing and its images for a realtor.

        Args:
            params: Home attributes and image urls
            realtor_id: ID of the realtor who owns the listing

        Returns:
            Created home

        Raises:
            BadRequestError: If the listing could not be stored
        """
        try:
            home_data = params.to_home_data()
            home_data["realtor_id"] = realtor_id

            home = await self.home_repo.create(home_data)

            if params.images:
                await self.image_repo.create_many(
                    [{"url": image.url, "home_id": home.id} for image in params.images]
                )

            logger.info(f"Home created by realtor {realtor_id}: {home.address} (ID: {home.id}, {len(params.images)} images)")
            return HomeResponse.model_validate(home)

        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to create home for realtor {realtor_id}: {e}")
            raise BadRequestError(f"Failed to create home: {str(e)}")

    async def get_home_by_id(self, home_id: int) -> HomeDetailResponse:
        """
        Get a single home with all of its images and its realtor.

        Raises:
            HomeNotFoundError: If the home doesn't exist
        """
        home = await self.home_repo.get_home_with_details(home_id)
        if not home:
            raise HomeNotFoundError(home_id)

        urls = [image.url for image in home.images]
        fields = HomeResponse.model_validate(home).model_dump(exclude={"image"})
        return HomeDetailResponse(
            **fields,
            image=urls[0] if urls else None,
            images=urls,
            realtor=RealtorResponse.model_validate(home.realtor) if home.realtor else None,
        )

    async def update_home_by_id(self, home_id: int, params: UpdateHomeParams) -> HomeResponse:
        """
        Update the fields set on ``params`` for a home.

        Raises:
            ValidationError: If no field is set
            HomeNotFoundError: If the home doesn't exist
        """
        update_data = params.to_home_data()
        if not update_data:
            raise ValidationError("No valid fields provided for update")

        try:
            if not await self.home_repo.exists(home_id):
                raise HomeNotFoundError(home_id)

            home = await self.home_repo.update(home_id, update_data)
            if not home:
                raise HomeNotFoundError(home_id)

            logger.info(f"Home updated: {home_id} ({', '.join(update_data)})")
            return HomeResponse.model_validate(home)

        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to update home {home_id}: {e}")
            raise BadRequestError(f"Failed to update home: {str(e)}")

    async def delete_home_by_id(self, home_id: int) -> bool:
        """
        Delete a home and its images.

        Raises:
            HomeNotFoundError: If the home doesn't exist
        """
        try:
            if not await self.home_repo.exists(home_id):
                raise HomeNotFoundError(home_id)

            deleted_images = await self.image_repo.delete_by_home_id(home_id)
            deleted = await self.home_repo.delete(home_id)

            if deleted:
                logger.info(f"Home deleted: {home_id} (with {deleted_images} images)")
            return deleted

        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to delete home {home_id}: {e}")
            raise BadRequestError(f"Failed to delete home: {str(e)}")

    async def get_realtor_by_home_id(self, home_id: int) -> RealtorResponse:
        """
        Get the realtor who owns a home.

        Raises:
            HomeNotFoundError: If the home doesn't exist
        """
        home = await self.home_repo.get_home_with_details(home_id)
        if not home or not home.realtor:
            raise HomeNotFoundError(home_id)

        return RealtorResponse.model_validate(home.realtor)

    async def is_home_owner(self, home_id: int, realtor_id: Optional[int]) -> bool:
        """Check whether a realtor owns a home."""
        realtor = await self.get_realtor_by_home_id(home_id)
        return realtor_id is not None and realtor.id == realtor_id
