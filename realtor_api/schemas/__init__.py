"""
Pydantic schemas for home service parameters and responses.
"""

from realtor_api.schemas.home import (
    ImageParams,
    CreateHomeParams,
    UpdateHomeParams,
    HomeFilters,
    HomeResponse,
    HomeDetailResponse,
    RealtorResponse,
)

__all__ = [
    "ImageParams",
    "CreateHomeParams",
    "UpdateHomeParams",
    "HomeFilters",
    "HomeResponse",
    "HomeDetailResponse",
    "RealtorResponse",
]
