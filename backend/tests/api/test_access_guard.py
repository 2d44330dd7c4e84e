"""
Tests for the bearer token access guard.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
import pytest


@pytest.fixture
def make_token(settings):
    """Sign arbitrary claims with the app's secret."""

    def _make(payload: dict) -> str:
        return jwt.encode(payload, settings.resolve_jwt_secret(), algorithm="HS256")

    return _make


class TestMissingToken:
    def test_no_header(self, client):
        response = client.get("/api/assignments")
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, no token"}

    def test_wrong_scheme(self, client, signup):
        token = signup()["token"]
        response = client.get("/api/assignments", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, no token"}

    def test_scheme_without_token(self, client):
        response = client.get("/api/assignments", headers={"Authorization": "Bearer"})
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, no token"}

    def test_challenge_header(self, client):
        response = client.get("/api/notes")
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestSchemeMatching:
    @pytest.mark.parametrize("scheme", ["Bearer", "bearer", "BEARER"])
    def test_scheme_is_case_insensitive(self, client, signup, scheme):
        token = signup()["token"]
        response = client.get("/api/assignments", headers={"Authorization": f"{scheme} {token}"})
        assert response.status_code == 200


class TestRejectedToken:
    def test_garbage_token(self, client):
        response = client.get("/api/assignments", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token failed"}

    def test_wrong_secret(self, client, signup):
        user_id = signup()["id"]
        now = datetime.now(timezone.utc)
        forged = jwt.encode(
            {"id": user_id, "iat": now, "exp": now + timedelta(days=1)},
            "attacker-secret",
            algorithm="HS256",
        )
        response = client.get("/api/assignments", headers={"Authorization": f"Bearer {forged}"})
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token failed"}

    def test_expired_token(self, client, signup, make_token):
        user_id = signup()["id"]
        past = datetime.now(timezone.utc) - timedelta(days=31)
        token = make_token({"id": user_id, "iat": past, "exp": past + timedelta(days=30)})

        response = client.get("/api/assignments", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token failed"}

    def test_identity_no_longer_exists(self, client, signup, fake_db, auth_headers):
        """A valid token for a deleted user is rejected, never passed through as anonymous."""
        session = signup()
        fake_db.tables["users"].clear()

        response = client.get("/api/assignments", headers=auth_headers(session))

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token failed"}

    def test_reason_is_logged_not_returned(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="api.middleware.auth"):
            response = client.get("/api/assignments", headers={"Authorization": "Bearer garbage"})

        assert "INVALID_TOKEN" not in response.text
        assert any("INVALID_TOKEN" in record.getMessage() for record in caplog.records)


class TestAcceptedToken:
    def test_handler_receives_identity(self, client, signup, auth_headers):
        session = signup("a@b.com", name="Asha")

        response = client.get("/api/users/me", headers=auth_headers(session))

        assert response.status_code == 200
        assert response.json() == {"id": session["id"], "name": "Asha", "email": "a@b.com"}

    def test_profile_requires_auth(self, client):
        assert client.get("/api/users/me").status_code == 401
