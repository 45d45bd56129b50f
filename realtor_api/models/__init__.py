"""
Database models for the realtor listing service.
Includes User, Home, and Image models with relationships and validation.
"""

from realtor_api.models.user import User, UserType
from realtor_api.models.home import Home, PropertyType
from realtor_api.models.image import Image

__all__ = [
    "User",
    "UserType",
    "Home",
    "PropertyType",
    "Image",
]
