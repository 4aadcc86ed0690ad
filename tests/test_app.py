"""
Tests for the composed application: health, root, and middleware.
"""

import logging

from fastapi.testclient import TestClient

from cats_api.core.config import settings
from cats_api.domain.auth.entities import DEFAULT_ROLE
from cats_api.shared.errors.handlers import TRACE_ID_HEADER
from cats_api.shared.middleware import SECURE_HEADERS


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {
            "data": {"status": "ok", "version": settings.version},
            "code": 200,
            "message": "success",
        }


class TestRootEndpoint:
    def test_hello(self, client: TestClient) -> None:
        assert client.get("/").json() == {
            "data": "Hello World!",
            "code": 200,
            "message": "success",
        }


class TestMiddleware:
    """Tests for headers added to every response."""

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.get("/api/v1/cats")
        assert response.status_code == 401
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_trace_id_echoed_on_success(self, client: TestClient) -> None:
        response = client.get("/api/v1/health", headers={TRACE_ID_HEADER: "t-1"})
        assert response.headers[TRACE_ID_HEADER] == "t-1"

    def test_docs_hidden_without_debug(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/api/v1/dogs")
        body = response.json()
        assert response.status_code == 404
        assert body["code"] == "NOT_FOUND"
        assert body["path"] == "/api/v1/dogs"
        assert response.headers[TRACE_ID_HEADER] == body["traceId"]


class TestFaultLogging:
    """Each faulting request leaves one WARNING-or-above record."""

    @staticmethod
    def _records(caplog) -> tuple[list[logging.LogRecord], list[logging.LogRecord]]:
        ours = [r for r in caplog.records if r.name.startswith("cats_api")]
        faults = [r for r in ours if r.levelno >= logging.WARNING]
        access = [r for r in ours if r.name == "cats_api.http"]
        return faults, access

    def test_unknown_fault(self, client: TestClient, text_generator, caplog) -> None:
        text_generator.error = RuntimeError("provider down")
        with caplog.at_level(logging.INFO):
            response = client.post("/api/v1/ai/chat", json={"message": "hi"})
        assert response.status_code == 500

        faults, access = self._records(caplog)
        assert [r.name for r in faults] == ["cats_api.errors"]
        assert "provider down" in faults[0].getMessage()
        assert [r.levelno for r in access] == [logging.INFO]
        assert "status=500" in access[0].getMessage()

    def test_protocol_fault(self, client: TestClient, caplog) -> None:
        with caplog.at_level(logging.INFO):
            assert client.get("/api/v1/cats").status_code == 401

        faults, access = self._records(caplog)
        assert [r.name for r in faults] == ["cats_api.errors"]
        assert [r.levelno for r in access] == [logging.INFO]

    def test_business_fault(self, client: TestClient, admin, caplog) -> None:
        payload = {"name": "Tom", "age": 3, "breed": "Tabby"}
        client.post("/api/v1/cats", json=payload)
        caplog.clear()
        with caplog.at_level(logging.INFO):
            assert client.post("/api/v1/cats", json=payload).json()["code"] == 400

        faults, _ = self._records(caplog)
        assert len(faults) == 1
        assert faults[0].levelno == logging.WARNING

    def test_forbidden(self, client: TestClient, login_as, caplog) -> None:
        login_as(DEFAULT_ROLE)
        with caplog.at_level(logging.INFO):
            body = client.delete("/api/v1/cats/1").json()
        assert body["code"] == 403

        faults, _ = self._records(caplog)
        assert [r.name for r in faults] == ["cats_api.errors"]
