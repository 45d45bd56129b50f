"""
Test configuration and fixtures for the realtor listing service.
Provides database fixtures, test data factories, and common test utilities.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from typing import AsyncGenerator, List
from unittest.mock import AsyncMock, Mock
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from realtor_api.database import Base
from realtor_api.models.user import User, UserType
from realtor_api.models.home import Home, PropertyType
from realtor_api.repositories.home import HomeRepository
from realtor_api.repositories.image import ImageRepository
from realtor_api.repositories.user import UserRepository
from realtor_api.services.home import HomeService


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine():
    """Create an in-memory database with the full schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def home_repository(db_session: AsyncSession) -> HomeRepository:
    return HomeRepository(db_session)


@pytest.fixture
def image_repository(db_session: AsyncSession) -> ImageRepository:
    return ImageRepository(db_session)


# Service fixtures
@pytest.fixture
def home_service(db_session: AsyncSession) -> HomeService:
    """Home service backed by the test database."""
    return HomeService(db_session)


@pytest.fixture
def mocked_home_service() -> HomeService:
    """Home service whose repositories are mocks."""
    service = HomeService(Mock(spec=AsyncSession))
    service.home_repo = Mock(spec=HomeRepository)
    service.home_repo.find_many = AsyncMock(return_value=[])
    service.home_repo.create = AsyncMock()
    service.home_repo.exists = AsyncMock(return_value=True)
    service.home_repo.update = AsyncMock()
    service.home_repo.delete = AsyncMock(return_value=True)
    service.home_repo.get_home_with_details = AsyncMock(return_value=None)
    service.image_repo = Mock(spec=ImageRepository)
    service.image_repo.create_many = AsyncMock(return_value=[])
    service.image_repo.delete_by_home_id = AsyncMock(return_value=0)
    return service


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    _counter = 0

    @classmethod
    def create_user_data(
        cls,
        email: str = None,
        name: str = "Test Realtor",
        phone: str = "555 555 5555",
        user_type: UserType = UserType.REALTOR,
    ) -> dict:
        """Create user data dictionary."""
        cls._counter += 1
        return {
            "email": email or f"realtor{cls._counter}@example.com",
            "name": name,
            "phone": phone,
            "user_type": user_type,
        }

    @classmethod
    async def create_user(cls, user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(cls.create_user_data(**kwargs))


class HomeFactory:
    """Factory for creating test homes."""

    @staticmethod
    def create_home_data(
        realtor_id: int,
        address: str = "12 Test Street",
        city: str = "Toronto",
        price: float = 500000,
        property_type: PropertyType = PropertyType.RESIDENTIAL,
        number_of_bedrooms: int = 3,
        number_of_bathrooms: float = 2,
        land_size: float = 300,
    ) -> dict:
        """Create home data dictionary."""
        return {
            "address": address,
            "city": city,
            "price": price,
            "property_type": property_type,
            "number_of_bedrooms": number_of_bedrooms,
            "number_of_bathrooms": number_of_bathrooms,
            "land_size": land_size,
            "realtor_id": realtor_id,
        }

    @staticmethod
    async def create_home(
        home_repo: HomeRepository,
        image_repo: ImageRepository,
        realtor_id: int,
        image_urls: List[str] = (),
        **kwargs
    ) -> Home:
        """Create a test home, and its images, in the database."""
        home = await home_repo.create(HomeFactory.create_home_data(realtor_id, **kwargs))
        if image_urls:
            await image_repo.create_many([{"url": url, "home_id": home.id} for url in image_urls])
        return home


# Common test fixtures
@pytest.fixture
async def test_realtor(user_repository: UserRepository) -> User:
    """Create a test realtor."""
    return await UserFactory.create_user(
        user_repository,
        email="realtor@test.com",
        name="Test Realtor",
        phone="416 555 0100",
    )


@pytest.fixture
async def test_home(
    home_repository: HomeRepository,
    image_repository: ImageRepository,
    test_realtor: User,
) -> Home:
    """Create a test home with two images."""
    return await HomeFactory.create_home(
        home_repository,
        image_repository,
        realtor_id=test_realtor.id,
        image_urls=["img1", "img2"],
    )
