"""Pytest configuration for global fixtures."""
from __future__ import annotations

import os
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

os.environ["SUPABASE_URL"] = os.environ.get("SUPABASE_URL") or "https://project.supabase.co"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or "test-service-role-key"
os.environ["SUPABASE_ANON_KEY"] = os.environ.get("SUPABASE_ANON_KEY") or "test-anon-key"
os.environ["RESEND_API_KEY"] = os.environ.get("RESEND_API_KEY") or "re_test_key"

from marketplace_api.main import app
from marketplace_api.middleware.auth import get_current_user
from marketplace_api.services.rate_limiter import email_rate_limiter

_RealAsyncClient = httpx.AsyncClient


class ResendStub:
    """Stands in for the Resend HTTP API and records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Dict[str, Any] = {"id": "msg_123"}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    email_rate_limiter.reset()
    yield
    email_rate_limiter.reset()


@pytest.fixture
def resend(monkeypatch: pytest.MonkeyPatch) -> ResendStub:
    """Route outgoing httpx.AsyncClient traffic to a ResendStub."""

    stub = ResendStub()

    def client_factory(*args, **kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(stub.handler))

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return stub


@pytest.fixture
def test_client():
    """FastAPI test client authenticated as user-1."""

    app.dependency_overrides[get_current_user] = lambda: {"user_id": "user-1", "email": "user@example.com"}
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client() -> TestClient:
    """FastAPI test client without authentication overrides."""

    app.dependency_overrides.clear()
    return TestClient(app)
