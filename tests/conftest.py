"""Pytest configuration and fixtures.

Settings are read once at import, so the environment is prepared here before
any ``app`` module is imported.
"""

from __future__ import annotations

import os

os.environ["STORAGE_BACKEND"] = "memory"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["GOOGLE_KEY"] = "test-google-key"
os.environ["PLACES_KEY"] = "test-places-key"

from collections.abc import Iterator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402

CLAIM_FORM: dict[str, Any] = {
    "policy_number": "P1",
    "category": "auto",
    "description": "fender bender",
    "first_name": "Jane",
    "last_name": "Doe",
    "address": "1 Main St",
}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client bound to a fresh app lifespan with empty in-memory collections."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def claim_form() -> dict[str, Any]:
    return dict(CLAIM_FORM)


@pytest.fixture
def registered_user(client: TestClient) -> dict[str, str]:
    """Register an account and return its login body."""
    body = {"user_name": "adjuster", "password": "s3cret!", "email": "adj@example.com"}
    response = client.post("/register", json=body)
    assert response.status_code == 200
    return {"user_name": body["user_name"], "password": body["password"]}


@pytest.fixture
def logged_in_client(client: TestClient, registered_user: dict[str, str]) -> TestClient:
    """Client whose cookie jar holds a valid session."""
    response = client.post("/login", json=registered_user)
    assert response.status_code == 200
    assert client.cookies.get("jwt")
    return client
