"""Pytest fixtures and configuration for tourdesk tests."""

import os

# Configure the process before tourdesk is imported: signing secret, an in-memory
# default database, and cheap Argon2 parameters so hashing stays fast.
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RUN_MIGRATIONS"] = "False"
os.environ["PASSWORD_HASH_TIME_COST"] = "1"
os.environ["PASSWORD_HASH_MEMORY_COST"] = "1024"
os.environ["PASSWORD_HASH_PARALLELISM"] = "1"

import pytest
import uuid
from datetime import date, datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from tourdesk.auth.jwt import TokenService
from tourdesk.auth.passwords import hash_password
from tourdesk.auth.user_directory import UserDirectory
from tourdesk.config import Settings
from tourdesk.database.database import Base
from tourdesk.database import models  # noqa: F401
from tourdesk.database.repository import TourRepository
from tourdesk.database.user_repository import UserRepository
from tourdesk.models.user import User, Gender, MembershipStatus


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

STRONG_PASSWORD = "R3g5T7#gh"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    # Create engine with StaticPool for in-memory database
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def user_repository(db_session: Session):
    """Create a UserRepository instance for testing."""
    return UserRepository(db_session)


@pytest.fixture
def tour_repository(db_session: Session):
    """Create a TourRepository instance for testing."""
    return TourRepository(db_session)


@pytest.fixture
def test_settings():
    """Settings with a known secret."""
    return Settings(jwt_secret_key="test-secret-key")


@pytest.fixture
def token_service(test_settings):
    """TokenService signing with the test secret."""
    return TokenService(test_settings)


@pytest.fixture
def user_directory(user_repository, token_service):
    """UserDirectory over the test database."""
    return UserDirectory(user_repository, token_service)


@pytest.fixture
def signup_payload():
    """Valid signup fields.

    Returns a dict that can be overridden per test.
    """
    return {
        "name": "Test User",
        "email": "testuser@example.com",
        "password": STRONG_PASSWORD,
        "phone_number": "1234567890",
        "gender": "Male",
        "date_of_birth": "1990-01-01",
        "membership_status": "Active",
    }


@pytest.fixture
def tour_payload():
    """Valid tour fields."""
    return {
        "name": "Mountain Adventure",
        "info": "Explore beautiful mountains",
        "image": "mountain.jpg",
        "price": "150",
    }


@pytest.fixture
def make_user(user_repository):
    """Factory that stores a user directly through the repository."""
    def _make_user(email: str = "owner@example.com", password: str = STRONG_PASSWORD) -> User:
        now = datetime.utcnow()
        user = User(
            id=str(uuid.uuid4()),
            email=email,
            name="Owner",
            phone_number="1234567890",
            gender=Gender.FEMALE,
            date_of_birth=date(1990, 1, 1),
            membership_status=MembershipStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )
        return user_repository.create(user, hash_password(password))
    return _make_user


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from tourdesk.api.app import app
    from tourdesk.database.database import get_db

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()


@pytest.fixture
def signup(test_client, signup_payload):
    """Sign up through the API and return (token, user JSON)."""
    def _signup(**overrides):
        response = test_client.post("/users/signup", json={**signup_payload, **overrides})
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["user"]
    return _signup


@pytest.fixture
def auth_header():
    """Build an Authorization header for a token."""
    def _auth_header(token: str, scheme: str = "Bearer") -> dict:
        return {"Authorization": f"{scheme} {token}"}
    return _auth_header
