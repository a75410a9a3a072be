"""Fixtures for afwkd API tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from afwk_library.config.settings import AfwkSettings
from afwkd.dependencies import get_settings
from afwkd.main import app
from afwkd.services.notifications import NotificationService


@pytest.fixture
def settings(workspace: Path, mock_storage_env: Path) -> AfwkSettings:
    """Settings whose default workspace is the test workspace."""
    return AfwkSettings(workspace_path=str(workspace), schema_path=None)


@pytest.fixture
def override_settings(settings: AfwkSettings):
    """Override settings dependency with test settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_notifications(monkeypatch: pytest.MonkeyPatch):
    """Isolate the notification singleton per test."""
    monkeypatch.setattr(NotificationService, "_instance", None)


@pytest.fixture
def client(override_settings, fresh_notifications) -> TestClient:
    """FastAPI test client with test settings."""
    return TestClient(app)
