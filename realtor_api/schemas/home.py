"""
Pydantic schemas for home service parameters and responses.
Parameters accept camelCase keys and expose snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime
from realtor_api.models.home import PropertyType


class CamelModel(BaseModel):
    """Base schema accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageParams(CamelModel):
    """Image attached to a new listing."""

    url: str = Field(..., min_length=1, max_length=500, description="Public image url")


class CreateHomeParams(CamelModel):
    """Parameters for creating a home listing together with its images."""

    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., gt=0)
    number_of_bedrooms: int = Field(..., ge=0, le=50)
    number_of_bathrooms: float = Field(..., ge=0, le=50)
    land_size: float = Field(..., gt=0)
    property_type: PropertyType
    images: List[ImageParams] = Field(default_factory=list)

    @field_validator('address', 'city')
    @classmethod
    def validate_text(cls, v):
        """Strip surrounding whitespace and reject blank values."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()

    def to_home_data(self) -> Dict[str, Any]:
        """Column values for the new home, without images."""
        return self.model_dump(exclude={"images"})


class UpdateHomeParams(CamelModel):
    """Parameters for updating a home listing; only set fields are written."""

    address: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, gt=0)
    number_of_bedrooms: Optional[int] = Field(None, ge=0, le=50)
    number_of_bathrooms: Optional[float] = Field(None, ge=0, le=50)
    land_size: Optional[float] = Field(None, gt=0)
    property_type: Optional[PropertyType] = None

    def to_home_data(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class HomeFilters(CamelModel):
    """Optional listing filters."""

    city: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    property_type: Optional[PropertyType] = None

    @model_validator(mode='after')
    def validate_price_range(self):
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("Minimum price cannot be greater than maximum price")
        return self

    def to_where(self) -> Dict[str, Any]:
        """
        Build a repository filter dictionary, leaving out unset filters.

        Returns:
            e.g. ``{"city": "Toronto", "price": {"gte": 1000, "lte": 5000}}``
        """
        where: Dict[str, Any] = {}
        if self.city:
            where["city"] = self.city

        price: Dict[str, float] = {}
        if self.min_price is not None:
            price["gte"] = self.min_price
        if self.max_price is not None:
            price["lte"] = self.max_price
        if price:
            where["price"] = price

        if self.property_type:
            where["property_type"] = self.property_type
        return where


class RealtorResponse(CamelModel):
    """Contact details of the realtor owning a listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    email: str
    phone: str


class HomeResponse(CamelModel):
    """Home listing as returned by the service."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    address: str
    city: str
    price: float
    property_type: PropertyType
    number_of_bedrooms: int
    number_of_bathrooms: float
    land_size: Optional[float] = None
    listed_date: Optional[datetime] = None
    realtor_id: Optional[int] = None
    image: Optional[str] = Field(None, description="Url of the first image")


class HomeDetailResponse(HomeResponse):
    """Single home listing with every image and its realtor."""

    images: List[str] = Field(default_factory=list)
    realtor: Optional[RealtorResponse] = None
