"""
pytest configuration and fixtures.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.core.config import Settings
from user_store_api.app.main import create_app
from user_store_api.app.services.user_store import UserStore


@pytest.fixture
def store() -> UserStore:
    """Empty store whose first auto-assigned id is 1."""
    return UserStore()


@pytest.fixture
def app_settings() -> Settings:
    return Settings(log_level="WARNING", seed_demo_user=False)


@pytest.fixture
def client(app_settings: Settings, store: UserStore) -> Iterator[TestClient]:
    """HTTP client bound to an application serving ``store``."""
    app = create_app(app_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
