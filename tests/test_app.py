"""
Tests for the application shell: health check, error responses and dependencies.
"""

import json
import pytest
from unittest.mock import AsyncMock, Mock, patch
from httpx import ASGITransport, AsyncClient

from realtor_api.main import app
from realtor_api.services.error_handler import ErrorHandlerService
from realtor_api.services.home import HomeService
from realtor_api.utils.dependencies import get_home_service
from realtor_api.utils.exceptions import HomeNotFoundError, BadRequestError


@pytest.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, async_client: AsyncClient):
        with patch("realtor_api.main.check_database_connection", AsyncMock(return_value=True)):
            response = await async_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == {"connected": True}

    @pytest.mark.asyncio
    async def test_health_unhealthy_database(self, async_client: AsyncClient):
        with patch("realtor_api.main.check_database_connection", AsyncMock(return_value=False)):
            response = await async_client.get("/health")

        assert response.json()["status"] == "unhealthy"


class TestErrorHandler:

    def test_not_found_response(self):
        response = ErrorHandlerService.handle_api_exception(HomeNotFoundError(5))

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["message"] == "Home not found with ID: 5"
        assert "request_id" in body["error"]

    def test_bad_request_response(self):
        response = ErrorHandlerService.handle_api_exception(BadRequestError("Failed to create home: boom"))

        assert response.status_code == 400
        assert json.loads(response.body)["error"]["code"] == "BAD_REQUEST"


class TestDependencies:

    @pytest.mark.asyncio
    async def test_get_home_service(self):
        session = Mock()

        service = await get_home_service(db=session)

        assert isinstance(service, HomeService)
        assert service.home_repo.db is session
        assert service.image_repo.db is session


class TestDatabasePlumbing:
    """Exercise the module engine, which points at in-memory SQLite under test."""

    @pytest.mark.asyncio
    async def test_create_check_and_drop_tables(self):
        from realtor_api.database import create_tables, drop_tables, check_database_connection

        await create_tables()
        assert await check_database_connection() is True
        await drop_tables()

    @pytest.mark.asyncio
    async def test_lifespan_checks_and_closes_connection(self):
        from realtor_api.main import lifespan

        check = AsyncMock(return_value=False)
        close = AsyncMock()
        with patch("realtor_api.main.check_database_connection", check), \
                patch("realtor_api.main.close_db_connection", close):
            async with lifespan(app):
                check.assert_awaited_once()
                close.assert_not_awaited()

        close.assert_awaited_once()
