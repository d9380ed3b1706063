"""
Test configuration and fixtures for the blog backend.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from blog_app.database.connection import Base, get_db
from blog_app.dependencies import get_token_service
from blog_app.services.token_service import TokenService

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_SECRET_KEY = "test-secret-key"
TEST_ADMIN_PASSWORD = "correct-horse"
TEST_TOKEN_TTL = 24 * 60 * 60


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def token_service():
    """Token service with a known secret and password"""
    return TokenService(
        secret_key=TEST_SECRET_KEY,
        admin_password=TEST_ADMIN_PASSWORD,
        ttl_seconds=TEST_TOKEN_TTL,
    )


@pytest.fixture(scope="function")
def client(db_session, token_service):
    """
    Create a test client with database and auth dependencies overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session

    # Override the dependencies
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def auth_headers(client):
    """Authorization header for a logged-in admin"""
    response = client.post("/api/v1/auth/login", json={"password": TEST_ADMIN_PASSWORD})
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
