import os
import tempfile
import uuid

import pytest
from fastapi.testclient import TestClient

from taskmanager.config import Settings
from taskmanager.database import Base
from taskmanager.main import create_app

PASSWORD = "SecurePass123!"

TEST_SETTINGS = Settings(
    secret_key="test-secret-key",
    database_url="sqlite:///" + os.path.join(tempfile.gettempdir(), f"taskmanager_test_{os.getpid()}.db"),
)


@pytest.fixture(scope="session")
def app():
    return create_app(TEST_SETTINGS)


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database(app):
    engine = app.state.engine
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(app):
    return TestClient(app)


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}@example.com"


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Register a fresh user and return ``(token, user)``."""

    def _register(email: str = None, password: str = PASSWORD):
        r = client.post("/api/auth/register", json={"email": email or unique_email(), "password": password})
        assert r.status_code == 201, r.text
        data = r.json()["data"]
        return data["token"], data["user"]

    return _register
