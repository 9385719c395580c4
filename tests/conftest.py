"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from webinar_backend import models  # noqa: F401  (registers tables on Base.metadata)
from webinar_backend.database import Base
from webinar_backend.domain.common.value_objects.ids import UserId, WebinarId
from webinar_backend.domain.identity.entities.user import User
from webinar_backend.domain.webinars.entities.webinar import Webinar

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def alice() -> User:
    """Organizer of the default test webinar."""
    return User(id=UserId("alice"))


@pytest.fixture
def bob() -> User:
    """A user who organizes nothing."""
    return User(id=UserId("bob"))


def create_test_webinar(
    id: str = "webinar-id",
    organizer_id: str = "alice",
    title: str = "Webinar title",
    start_date: datetime = datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
    end_date: datetime = datetime(2024, 1, 1, 1, 0, tzinfo=UTC),
    seats: int = 100,
) -> Webinar:
    """Helper function to create a test webinar."""
    return Webinar(
        id=WebinarId(id),
        organizer_id=UserId(organizer_id),
        title=title,
        start_date=start_date,
        end_date=end_date,
        seats=seats,
    )
