"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from slack_gitlab_bridge.app import app
from slack_gitlab_bridge.config import Settings, get_settings
from slack_gitlab_bridge.slack.client import reset_client
from tests.helpers import make_settings


@pytest.fixture
def settings() -> Settings:
    """Settings with every credential populated."""
    return make_settings()


@pytest.fixture
def client(settings: Settings):
    """TestClient with the settings dependency overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_slack_client():
    """Ensure clean Slack client singleton state for every test."""
    reset_client()
    yield
    reset_client()
