"""
Tests for middleware and infrastructure components.
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from rest_api.core.middlewares import (
    ContentTypeValidationMiddleware,
    SecurityHeadersMiddleware,
)
from shared.config.logging import DevelopmentFormatter, StructuredFormatter, get_logger
from shared.infrastructure.correlation import (
    CorrelationIdFilter,
    CorrelationIdMiddleware,
    get_request_id,
    request_id_var,
)
from shared.infrastructure.db import safe_commit


# =============================================================================
# SecurityHeadersMiddleware Tests
# =============================================================================

class TestSecurityHeadersMiddleware:
    """Tests for security headers middleware."""

    @pytest.fixture
    def test_client(self):
        app = FastAPI()
        app.add_middleware(SecurityHeadersMiddleware)

        @app.get("/test")
        def test_endpoint():
            return {"message": "ok"}

        return TestClient(app)

    def test_adds_security_headers(self, test_client):
        response = test_client.get("/test")
        assert response.headers.get("X-Content-Type-Options") == "nosniff"
        assert response.headers.get("X-Frame-Options") == "DENY"
        assert response.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"

    def test_no_hsts_outside_production(self, test_client):
        response = test_client.get("/test")
        assert "Strict-Transport-Security" not in response.headers


# =============================================================================
# ContentTypeValidationMiddleware Tests
# =============================================================================

class TestContentTypeValidationMiddleware:
    """Tests for content-type validation middleware."""

    @pytest.fixture
    def test_client(self):
        app = FastAPI()
        app.add_middleware(ContentTypeValidationMiddleware)

        @app.post("/echo")
        def echo(body: dict):
            return body

        return TestClient(app)

    def test_accepts_json(self, test_client):
        response = test_client.post("/echo", json={"a": 1})
        assert response.status_code == 200

    def test_rejects_form_data(self, test_client):
        response = test_client.post(
            "/echo",
            content="a=1",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 415


# =============================================================================
# Correlation ID Tests
# =============================================================================

class TestCorrelationId:
    """Tests for request correlation IDs."""

    @pytest.fixture
    def test_client(self):
        app = FastAPI()
        app.add_middleware(CorrelationIdMiddleware)

        @app.get("/whoami")
        def whoami():
            return {"request_id": get_request_id()}

        return TestClient(app)

    def test_generates_request_id(self, test_client):
        response = test_client.get("/whoami")
        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json()["request_id"] == request_id

    def test_propagates_incoming_request_id(self, test_client):
        response = test_client.get("/whoami", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["request_id"] == "abc-123"

    @pytest.mark.parametrize("incoming", ["has spaces", "x" * 65, "semi;colon"])
    def test_replaces_malformed_request_id(self, test_client, incoming):
        response = test_client.get("/whoami", headers={"X-Request-ID": incoming})
        request_id = response.headers["X-Request-ID"]
        assert request_id != incoming
        assert response.json()["request_id"] == request_id

    def test_filter_stamps_records(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", (), None)
        token = request_id_var.set("req-42")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            request_id_var.reset(token)
        assert record.request_id == "req-42"

    def test_app_returns_request_id(self, client):
        response = client.get("/api/health")
        assert response.headers.get("X-Request-ID")


# =============================================================================
# Logging Tests
# =============================================================================

class TestStructuredLogging:
    """Keyword context on log calls."""

    def _record(self, **extra_data):
        record = logging.LogRecord("rest_api", logging.WARNING, __file__, 1, "Entity created", (), None)
        record.extra_data = extra_data
        record.request_id = "req-1"
        return record

    def test_logger_accepts_keyword_context(self, caplog):
        logger = get_logger("rest_api.tests")
        with caplog.at_level(logging.INFO, logger="rest_api.tests"):
            logger.info("Entity created", entity="PriceList", entity_id="x")
        assert caplog.records[-1].extra_data == {"entity": "PriceList", "entity_id": "x"}

    def test_json_formatter(self):
        import json

        output = json.loads(StructuredFormatter().format(self._record(entity="PriceList")))
        assert output["message"] == "Entity created"
        assert output["level"] == "WARNING"
        assert output["request_id"] == "req-1"
        assert output["data"] == {"entity": "PriceList"}

    def test_development_formatter(self):
        output = DevelopmentFormatter().format(self._record(entity="PriceList"))
        assert "Entity created" in output
        assert "entity=PriceList" in output


# =============================================================================
# Database helpers
# =============================================================================

class TestSafeCommit:
    """safe_commit rolls back and re-raises."""

    def test_rolls_back_on_failure(self):
        session = MagicMock()
        session.commit.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            safe_commit(session)
        session.rollback.assert_called_once()

    def test_commits(self):
        session = MagicMock()
        safe_commit(session)
        session.commit.assert_called_once()
        session.rollback.assert_not_called()
