from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.core.store import UserStore
from user_directory_api.app.main import create_app


@pytest.fixture()
def app_settings(tmp_path: Path) -> Settings:
    # Point the public directory somewhere empty so static files stay off.
    return Settings(environment="production", public_dir=str(tmp_path / "missing-public"))


@pytest.fixture()
def store() -> UserStore:
    return UserStore()


@pytest.fixture()
def client(app_settings: Settings, store: UserStore):
    app = create_app(app_settings, store)
    with TestClient(app) as test_client:
        yield test_client
