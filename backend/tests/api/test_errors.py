"""Tests for the exception handlers and application factory."""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from api.app import create_app
from api.errors import status_for
from shared.config import Settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    SaarthiError,
    ValidationError,
)


class TestStatusMapping:
    @pytest.mark.parametrize("error, expected", [
        (ValidationError("x"), 400),
        (ConflictError("x"), 400),
        (AuthenticationError("x"), 401),
        (AuthorizationError("x"), 403),
        (NotFoundError("x"), 404),
        (SaarthiError("x"), 500),
    ])
    def test_status_for(self, error, expected):
        assert status_for(error) == expected


def _app_with_failing_route(settings: Settings) -> TestClient:
    app = create_app(settings)
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    app.include_router(router, prefix="/api/test")
    return TestClient(app, raise_server_exceptions=False)


class TestErrorBodies:
    def test_unknown_route(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_schema_failure_is_400(self, client, signup, auth_headers):
        headers = auth_headers(signup())
        response = client.post("/api/assignments", json={"dueDate": "not-a-date"}, headers=headers)
        assert response.status_code == 400
        assert "message" in response.json()

    def test_unhandled_error_has_stack_outside_production(self, fake_db):
        client = _app_with_failing_route(Settings(environment="test", _env_file=None))

        response = client.get("/api/test/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "kaboom"
        assert "RuntimeError" in data["stack"]


class TestStartup:
    def test_missing_secret_is_fatal(self):
        settings = Settings(jwt_secret="", environment="production", _env_file=None)
        with pytest.raises(ConfigurationError):
            create_app(settings)

    def test_docs_only_in_debug(self, fake_db):
        debug = TestClient(create_app(Settings(debug=True, _env_file=None)))
        quiet = TestClient(create_app(Settings(debug=False, _env_file=None)))
        assert debug.get("/api/docs").status_code == 200
        assert quiet.get("/api/docs").status_code == 404

    def test_legacy_routes_off_by_default(self, client):
        assert client.get("/api/legacy/assignments?userId=x").status_code == 404
