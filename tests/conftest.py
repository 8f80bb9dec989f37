# tests/conftest.py

from __future__ import annotations

from typing import Any

import pytest
import requests

from tasks_api.app import create_app
from tasks_api.utils.store import TaskStore

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret-key",
    "JWT_SECRET_KEY": "test-jwt-secret-key-with-enough-bytes",
    "FIREBASE_API_KEY": "test-firebase-key",
    "API_PREFIX": "/api",
}


@pytest.fixture()
def store() -> TaskStore:
    """Seeded store, fresh for every test."""
    return TaskStore()


@pytest.fixture()
def app(store: TaskStore):
    return create_app(dict(TEST_CONFIG), store=store)


@pytest.fixture()
def make_app():
    """Factory for apps built with config on top of TEST_CONFIG and an empty store."""

    def _make(**overrides: Any):
        return create_app({**TEST_CONFIG, **overrides}, store=TaskStore(seed=False))

    return _make


@pytest.fixture()
def client(app):
    return app.test_client()


class FakeResponse:
    """Just enough of requests.Response for the identity lookup."""

    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeIdentityProvider:
    """
    Stands in for requests.post in tasks_api.routes.auth_routes.

    - Captures calls for assertions
    - Returns `response`, or raises `error` when set
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.response = FakeResponse(
            200,
            {"users": [{"localId": "uid-1", "email": "test@example.com", "displayName": "Test User"}]},
        )
        self.error: Exception | None = None

    def respond(self, status_code: int, payload: Any = None) -> None:
        self.response = FakeResponse(status_code, payload)

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def identity_provider(monkeypatch: pytest.MonkeyPatch) -> FakeIdentityProvider:
    fake = FakeIdentityProvider()
    monkeypatch.setattr("tasks_api.routes.auth_routes.requests.post", fake)
    return fake
