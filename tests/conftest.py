"""Pytest configuration and fixtures.

Required settings are read when ``server.core.config`` is imported, so the
environment is populated here before anything from the app is loaded.
"""
import os
import shutil
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="server-tests-")

os.environ.setdefault("GITHUB_CLIENT_ID", "test_client_id")
os.environ.setdefault("GITHUB_CLIENT_SECRET", "test_client_secret")
os.environ.setdefault("GITHUB_CALLBACK_URL", "http://localhost:5050/auth/github/callback")
os.environ.setdefault("CLIENT_URL", "http://localhost:3000")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from server.app import app
from server.core import engine
from server.services.github import GitHubProfile

CLIENT_URL = os.environ["CLIENT_URL"]


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test an empty schema."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def db():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    """FastAPI test client with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def octocat():
    return GitHubProfile(
        github_id="583231",
        username="octocat",
        avatar_url="https://avatars.githubusercontent.com/u/583231",
    )


@pytest.fixture
def login(monkeypatch):
    """Complete the GitHub callback for ``profile`` without touching the network."""

    def _login(client, profile):
        async def fake_fetch(request):
            return profile

        monkeypatch.setattr(
            "server.api.routers.auth.fetch_github_profile", fake_fetch
        )
        return client.get(
            "/auth/github/callback?code=abc&state=xyz", follow_redirects=False
        )

    return _login


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_DB_DIR, ignore_errors=True)
