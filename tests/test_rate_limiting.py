"""
Tests for rate limiting.

The application limiter is disabled for the suite, so limits are checked
on a small app with its own limiter.
"""

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from cats_api.main import app as cats_app
from cats_api.shared.errors.handlers import ExceptionTranslator, register_error_handlers
from cats_api.shared.security.rate_limiting import setup_rate_limiting


@pytest.fixture
def limited_client() -> TestClient:
    app = FastAPI()
    translator = ExceptionTranslator(logging.getLogger("tests.errors"))
    register_error_handlers(app, translator)
    setup_rate_limiting(
        app,
        translator,
        Limiter(key_func=get_remote_address, default_limits=["2/minute"]),
    )

    @app.get("/ping")
    def ping() -> dict:
        return {"pong": True}

    @app.get("/heavy")
    @app.state.limiter.limit("1/minute")
    def heavy(request: Request) -> dict:
        return {"done": True}

    return TestClient(app)


class TestRateLimiting:
    def test_default_limit_applies_to_undecorated_routes(
        self, limited_client: TestClient
    ) -> None:
        assert limited_client.get("/ping").status_code == 200
        assert limited_client.get("/ping").status_code == 200

        response = limited_client.get("/ping")
        body = response.json()
        assert response.status_code == 429
        assert body["code"] == "TOO_MANY_REQUESTS"
        assert body["path"] == "/ping"
        assert "traceId" in body

    def test_route_limit_overrides_default(self, limited_client: TestClient) -> None:
        assert limited_client.get("/heavy").status_code == 200
        assert limited_client.get("/heavy").status_code == 429

    def test_application_mounts_middleware(self) -> None:
        assert any(m.cls is SlowAPIMiddleware for m in cats_app.user_middleware)
