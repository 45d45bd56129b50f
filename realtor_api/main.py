"""
FastAPI application entry point.
Hosts the home service behind health checks and structured error handling.
"""

from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from typing import Dict, Any
import logging

from realtor_api.config import settings
from realtor_api.database import check_database_connection, close_db_connection
from realtor_api.utils.exceptions import APIException
from realtor_api.services.error_handler import ErrorHandlerService

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    db_connected = await check_database_connection()
    if not db_connected:
        logger.error("Failed to connect to database on startup")

    yield

    logger.info("Shutting down application")
    await close_db_connection()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions with structured error responses."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Any]:
    """Report service and database status."""
    db_healthy = await check_database_connection()
    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "database": {"connected": db_healthy},
    }
