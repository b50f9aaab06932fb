import os
import sys
import tempfile
import time
import uuid

import jwt
import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

# Config is read at import time, so the environment is fixed up first
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_BASE", tempfile.mkdtemp(prefix="farmer-network-uploads-"))
os.environ["OPENWEATHER_KEY"] = ""

from dishka import make_async_container
from fastapi.testclient import TestClient

from farmer_network.config.settings import Config
from farmer_network.fastapi_app import create_fastapi_app
from farmer_network.setup.ioc.container import AppProvider
from fakes import InMemoryRepositoryProvider, InMemoryStore


def _service_token(username="alice", user_id=None, ttl=300, **overrides):
    now = int(time.time())
    claims = {
        "sub": user_id or str(uuid.uuid4()),
        "username": username,
        "iat": now,
        "exp": now + ttl,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    claims.update(overrides)
    return jwt.encode(claims, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


@pytest.fixture()
def store():
    """Fresh in-memory database for each test."""
    return InMemoryStore()


@pytest.fixture()
def app(store):
    """Create and configure a new FastAPI app instance for each test."""
    container = make_async_container(AppProvider(), InMemoryRepositoryProvider(store))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def headers_for():
    """Build bearer headers for any username (the user need not exist)."""

    def _headers(username, user_id=None, **overrides):
        token = _service_token(username=username, user_id=user_id, **overrides)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def auth_headers(headers_for):
    """Authentication headers with valid JWT token."""
    return headers_for("alice")


@pytest.fixture()
def register(client):
    """Register a user through the API. Returns (user json, auth headers)."""

    def _register(username, password="secret123", **profile):
        res = client.post(
            "/api/auth/register",
            json={"username": username, "password": password, **profile},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _register
