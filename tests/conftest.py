"""Shared test fixtures."""

import os

# Keep the module-level app from writing metrics into the repo
os.environ["METRICS_PATH"] = ""
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Settings
from core.session import ChatSession


@pytest.fixture
def metrics_path(tmp_path):
    return tmp_path / "metrics.jsonl"


@pytest.fixture
def client(metrics_path):
    """TestClient over a fresh app that logs metrics to tmp_path."""
    settings = Settings(app_env="test", metrics_path=str(metrics_path))
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def session(client):
    """ChatSession wired straight into the in-process app."""
    return ChatSession(client=client)
