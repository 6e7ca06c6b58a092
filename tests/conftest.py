"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides an in-memory database per test, repository fixtures, and test data factories.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from lightbnb.config import Settings
from lightbnb.database import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
    close_engine,
)
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory SQLite database."""
    return Settings(database_url=TEST_DATABASE_URL, environment="testing")


@pytest.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh database with the full schema for each test."""
    engine = create_engine_from_settings(test_settings)
    await create_tables(engine)
    yield engine
    await close_engine(engine)


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: str = None,
        password: str = "password"
    ) -> UserCreate:
        """Create user input."""
        return UserCreate(
            name=name,
            email=email or f"test{uuid.uuid4().hex[:8]}@example.com",
            password=password
        )

    @staticmethod
    async def create_user(
        user_repo: UserRepository,
        name: str = "Test User",
        email: str = None,
        password: str = "password"
    ) -> User:
        """Create a test user in the database."""
        return await user_repo.add_user(
            UserFactory.create_user_data(name=name, email=email, password=password)
        )


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: Optional[int] = None,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        **extra
    ) -> PropertyCreate:
        """Create property input."""
        return PropertyCreate(
            owner_id=owner_id,
            title=title,
            cost_per_night=cost_per_night,
            city=city,
            **extra
        )

    @staticmethod
    async def create_property(
        property_repo: PropertyRepository,
        owner_id: Optional[int] = None,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        ratings: tuple = (),
        **extra
    ) -> Property:
        """Create a test property in the database, with one review per rating."""
        created = await property_repo.add_property(
            PropertyFactory.create_property_data(
                owner_id=owner_id,
                title=title,
                cost_per_night=cost_per_night,
                city=city,
                **extra
            )
        )
        for rating in ratings:
            property_repo.db.add(PropertyReview(property_id=created.id, rating=rating))
        if ratings:
            await property_repo.db.commit()
        return created


class ReservationFactory:
    """Factory for creating test reservations."""

    @staticmethod
    async def create_reservation(
        db: AsyncSession,
        guest_id: int,
        property_id: int,
        start_date: date = date(2026, 1, 1),
        end_date: date = date(2026, 1, 5)
    ) -> Reservation:
        """Create a test reservation in the database."""
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date
        )
        db.add(reservation)
        await db.commit()
        return reservation


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a test property owner."""
    return await UserFactory.create_user(
        user_repository,
        name="Test Owner",
        email="owner@test.com"
    )


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a test guest."""
    return await UserFactory.create_user(
        user_repository,
        name="Test Guest",
        email="guest@test.com"
    )


@pytest.fixture
async def test_property(property_repository: PropertyRepository, test_owner: User) -> Property:
    """Create a reviewed test property."""
    return await PropertyFactory.create_property(
        property_repository,
        owner_id=test_owner.id,
        title="Test Property",
        cost_per_night=15000,
        ratings=(4, 5)
    )


@pytest.fixture
async def listed_properties(property_repository: PropertyRepository, test_owner: User) -> list:
    """Create a spread of reviewed properties across cities, prices and ratings."""
    specs = [
        ("Budget Room", 400, "Vancouver", (2, 3)),
        ("Exactly Five", 500, "Victoria", (5,)),
        ("City Loft", 12000, "Vancouver", (4, 5, 5)),
        ("Lake Cabin", 8000, "Kelowna", (3, 4)),
        ("Penthouse", 50000, "Toronto", (5, 4)),
    ]
    created = []
    for title, cost, city, ratings in specs:
        created.append(await PropertyFactory.create_property(
            property_repository,
            owner_id=test_owner.id,
            title=title,
            cost_per_night=cost,
            city=city,
            ratings=ratings
        ))
    return created


# Utility functions for tests
def assert_user_equal(user1: User, user2: User):
    """Assert that two users are equal."""
    assert user1.to_dict() == user2.to_dict()
