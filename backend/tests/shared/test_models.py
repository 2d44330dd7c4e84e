"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser, CamelModel


class TestAuthenticatedUser:
    def test_defaults_name(self):
        user = AuthenticatedUser(id="u1", email="a@example.com")
        assert user.name == "User"

    def test_is_frozen(self):
        user = AuthenticatedUser(id="u1", email="a@example.com")
        with pytest.raises(ValidationError):
            user.id = "u2"

    def test_ignores_extra_fields(self):
        """A stray pin_hash in the source row must not end up on the model."""
        user = AuthenticatedUser(id="u1", email="a@example.com", pin_hash="$2b$...")
        assert not hasattr(user, "pin_hash")
        assert "pin_hash" not in user.model_dump()


class Sample(CamelModel):
    due_date: str
    user_id: str


class TestCamelModel:
    def test_serializes_camel_case(self):
        sample = Sample(due_date="2026-03-05", user_id="u1")
        assert sample.model_dump(by_alias=True) == {"dueDate": "2026-03-05", "userId": "u1"}

    def test_accepts_either_name(self):
        assert Sample(dueDate="x", userId="y").due_date == "x"
        assert Sample(due_date="x", user_id="y").user_id == "y"
