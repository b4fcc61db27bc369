import os
import time
import jwt
import pytest

# Must be set before adoption_api.config.settings is imported
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret-for-the-adoption-api-suite")
os.environ.setdefault("SERVICE_AUTH_AUDIENCE", "your_service_audience")
os.environ.setdefault("SERVICE_AUTH_ISSUER", "your_service_name")

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from adoption_api.config.settings import Config
from adoption_api.fastapi_app import create_fastapi_app
from adoption_api.setup.ioc.providers import ApplicationProvider
from tests.fakes import InMemoryProvider, InMemoryStore

ALICE = "user-alice"
BOB = "user-bob"
CAROL = "user-carol"


def service_token(user_id=ALICE, name="Alice", exp_offset=300):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user_id,
            "name": name,
            "iat": now,
            "exp": now + exp_offset,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        Config.SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


def headers_for(user_id, name=None):
    return {"Authorization": f"Bearer {service_token(user_id, name)}"}


@pytest.fixture()
def store():
    """Fresh in-memory database with three known users."""
    s = InMemoryStore()
    s.add_user(ALICE, "Alice")
    s.add_user(BOB, "Bob")
    s.add_user(CAROL, "Carol")
    return s


@pytest.fixture()
def app(store):
    """FastAPI app wired to in-memory repositories."""
    container = make_async_container(
        InMemoryProvider(store), ApplicationProvider(), FastapiProvider()
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers for Alice."""
    return headers_for(ALICE, "Alice")
