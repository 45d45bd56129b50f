"""
Service layer for listing business logic.
"""

from .home import HomeService, HOME_SELECT
from .error_handler import ErrorHandlerService

__all__ = [
    "HomeService",
    "HOME_SELECT",
    "ErrorHandlerService",
]
