"""Global error envelope for unexpected failures."""

import logging
import uuid

from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from sprocket_api.api.main import app
from sprocket_api.core.deps import get_team_service
from sprocket_api.core.logging import LoggingContextFilter


class _ExplodingService:
    async def get_team(self, team_id):
        raise RuntimeError("database on fire")

    async def create_team(self, payload):
        raise IntegrityError("INSERT INTO teams", {}, Exception("constraint failed"))


def _override():
    yield _ExplodingService()


def test_unhandled_error_returns_500_envelope(client):
    app.dependency_overrides[get_team_service] = _override
    raw = TestClient(app, raise_server_exceptions=False)
    resp = raw.get(f"/api/v1/teams/{uuid.uuid4()}", headers={"X-Correlation-ID": "cid-500"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"]["type"] == "internal_error"
    assert body["error"]["message"] == "An unexpected error occurred"
    assert "database on fire" not in resp.text
    assert body["correlation_id"] == "cid-500"


def test_unhandled_error_is_logged_with_correlation_id(client, caplog):
    app.dependency_overrides[get_team_service] = _override
    raw = TestClient(app, raise_server_exceptions=False)
    context_filter = LoggingContextFilter()
    caplog.handler.addFilter(context_filter)
    try:
        with caplog.at_level(logging.ERROR, logger="sprocket_api.api.main"):
            resp = raw.get(f"/api/v1/teams/{uuid.uuid4()}", headers={"X-Correlation-ID": "cid-500"})
    finally:
        caplog.handler.removeFilter(context_filter)

    assert resp.status_code == 500
    errors = [r for r in caplog.records if r.levelno == logging.ERROR and r.name == "sprocket_api.api.main"]
    assert errors
    assert errors[0].correlation_id == "cid-500"
    assert errors[0].exc_info is not None


def test_integrity_error_returns_409(client):
    app.dependency_overrides[get_team_service] = _override
    resp = client.post("/api/v1/teams", json={"name": "Dup"})
    assert resp.status_code == 409
    assert resp.json()["error"]["type"] == "conflict"
