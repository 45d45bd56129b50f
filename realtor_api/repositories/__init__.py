"""
Repository layer for data access operations.
Wraps async SQLAlchemy sessions behind per-model query helpers.
"""

from realtor_api.repositories.base import BaseRepository
from realtor_api.repositories.home import HomeRepository
from realtor_api.repositories.image import ImageRepository
from realtor_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "HomeRepository",
    "ImageRepository",
    "UserRepository",
]
