"""
FastAPI dependency injection utilities for database sessions and services.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.database import get_db
from realtor_api.services.home import HomeService


async def get_home_service(db: AsyncSession = Depends(get_db)) -> HomeService:
    """
    Get home service instance.

    Args:
        db: Database session

    Returns:
        HomeService instance
    """
    return HomeService(db)
