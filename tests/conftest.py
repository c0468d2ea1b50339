"""Shared fixtures: in-memory MongoDB and an app wired to it."""

from typing import Dict

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.db.session import get_db
from app.main import app


@pytest.fixture
def db():
    return AsyncMongoMockClient()["devconnector_test"]


@pytest.fixture
def client(db):
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would try to reach a real MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, name: str = "Alice", email: str = "alice@example.com",
             password: str = "secret1") -> str:
    response = client.post("/api/users", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth(token: str) -> Dict[str, str]:
    return {"x-auth-token": token}


@pytest.fixture
def alice(client) -> Dict[str, str]:
    return auth(register(client))


@pytest.fixture
def bob(client) -> Dict[str, str]:
    return auth(register(client, name="Bob", email="bob@example.com"))
