# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds the app around an in-memory Supabase fake
# - Helpers to sign up, log in and authenticate requests
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from environment settings on import

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("IMAGES_PATH", tempfile.mkdtemp(prefix="chorebank-uploads-"))
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from tests.fake_supabase import FakeSupabase

PASSWORD = "Secret123"

# Smallest valid PNG header bytes; content is never decoded
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings(tmp_path):
    """Settings with a per-test upload directory and fast password hashing."""
    return Settings(
        SUPABASE_URL="https://test-project.supabase.co",
        SUPABASE_SERVICE_KEY="test-service-key",
        SECRET_KEY="test-secret-key-0123456789",
        IMAGES_PATH=str(tmp_path / "uploads"),
        PASSWORD_HASH_ROUNDS=4,
        MAX_UPLOAD_SIZE_MB=1,
    )


@pytest.fixture
def db():
    """Empty in-memory database."""
    return FakeSupabase()


@pytest.fixture
def app(settings, db):
    return create_app(settings, db=db)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def signup(client):
    """Create an account; returns the response."""
    def _signup(email: str = "parent@example.com", password: str = PASSWORD):
        return client.post("/v1/user", json={"email": email, "password": password})
    return _signup


@pytest.fixture
def login(client, signup):
    """Sign up (if needed) and log in; returns the Authorization header."""
    def _login(email: str = "parent@example.com", password: str = PASSWORD) -> dict:
        signup(email, password)
        response = client.post("/v1/user/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']}"}
    return _login


@pytest.fixture
def auth_headers(login):
    return login()


@pytest.fixture
def other_auth_headers(login):
    return login("other@example.com")


@pytest.fixture
def create_task(client, auth_headers):
    """Create a task for the default user and return its id."""
    def _create(description: str, headers: dict | None = None) -> str:
        headers = headers or auth_headers
        response = client.post("/v1/user/tasks", json={"description": description}, headers=headers)
        assert response.status_code == 201, response.text
        listing = client.get("/v1/user/tasks", headers=headers).json()["data"]
        return next(t["id"] for t in listing if t["description"] == description)
    return _create
