"""
pytest configuration and fixtures.
"""

import pytest
from faker import Faker
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ADMIN_AUTH = ("admin", "password123")


@pytest.fixture
def settings() -> Settings:
    return Settings(LOG_LEVEL="INFO")


@pytest.fixture
def api(settings):
    """Fresh application, so every test starts with empty stores."""
    return create_app(settings)


@pytest.fixture
def client(api):
    with TestClient(api) as c:
        yield c


@pytest.fixture
def fake() -> Faker:
    Faker.seed(1234)
    return Faker()


@pytest.fixture
def user_payload(fake) -> dict:
    """A valid user payload."""
    return {"username": fake.user_name(), "email": fake.email(), "password": fake.password()}


@pytest.fixture
def post_payload(fake) -> dict:
    """A valid post payload."""
    return {"title": fake.sentence(), "content": fake.text(max_nb_chars=200), "user_id": 1}


@pytest.fixture
def auth():
    return ADMIN_AUTH
