import asyncio
import os

os.environ.setdefault("TESTING", "1")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from slotly.main import app
from slotly.core.database import InMemoryDatabase, get_db
from slotly.core.security import UserRole
from slotly.services.auth_service import AuthService

@pytest.fixture(scope="function")
def test_db():
    database = InMemoryDatabase()
    app.dependency_overrides[get_db] = lambda: database
    yield database
    app.dependency_overrides.pop(get_db, None)

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def provider(test_db):
    """A provider account; providers cannot self-register over HTTP."""
    return asyncio.run(
        AuthService(test_db).register_user("bob", "pw2", role=UserRole.PROVIDER)
    )

@pytest.fixture
def login(client):
    """Return a helper that logs in and yields Authorization headers."""
    def _login(username, password):
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login

@pytest.fixture
def register_and_login(client, login):
    def _register_and_login(username, password):
        response = client.post("/register", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        return login(username, password)
    return _register_and_login
