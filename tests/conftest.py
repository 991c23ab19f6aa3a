"""Shared fixtures.

Settings are read at import time, so the test environment is set up
before anything under ``app`` is imported.  Every test gets a fresh
in-memory SQLite schema.
"""

import os

os.environ.setdefault("DATABASE_PASSWORD", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["DEBUG"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

import app.db.base  # noqa: E402,F401
from app.db.session import engine  # noqa: E402
from app.main import app  # noqa: E402
from app.routinize.food_catalog import seed_food_catalog  # noqa: E402
from app.schemas.user import UserCreate  # noqa: E402
from app.services.user_service import UserService  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture
def session():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db:
        yield db
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(session):
    with TestClient(app) as test_client:
        yield test_client


def _token(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/api/v1/auth/token", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def register(client):
    """Register a regular user and return its auth headers."""

    def _register(email: str = "ana@routinize.io") -> dict[str, str]:
        response = client.post("/api/v1/auth/register",
                               json={"email": email, "password": PASSWORD, "full_name": "Ana"})
        assert response.status_code == 201, response.text
        return _token(client, email)

    return _register


@pytest.fixture
def auth_headers(register):
    return register()


@pytest.fixture
def professional_headers(client, session):
    UserService(session).register(
        UserCreate(email="coach@routinize.io", password=PASSWORD, full_name="Coach"), is_superuser=True)
    return _token(client, "coach@routinize.io")


@pytest.fixture
def seeded_foods(session):
    return seed_food_catalog(session)
