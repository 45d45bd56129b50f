"""
Utility modules for the realtor listing service.
"""

from realtor_api.utils.exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    BadRequestError,
    HomeNotFoundError,
)

__all__ = [
    "APIException",
    "ValidationError",
    "NotFoundError",
    "BadRequestError",
    "HomeNotFoundError",
]
