"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    SaarthiError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)


class TestSaarthiError:
    def test_message(self):
        error = SaarthiError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code_is_class_name(self):
        assert SaarthiError("Test error").code == "SaarthiError"
        assert NotFoundError("gone").code == "NotFoundError"

    def test_custom_code_and_details(self):
        error = SaarthiError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_default_details_is_empty(self):
        assert SaarthiError("Test error").details == {}

    def test_to_dict(self):
        error = ValidationError("Bad input", code="BAD", details={"field": "title"})
        assert error.to_dict() == {
            "error": "BAD",
            "message": "Bad input",
            "details": {"field": "title"},
        }


class TestHierarchy:
    def test_all_inherit_from_base(self):
        for cls in (
            NotFoundError,
            ValidationError,
            ConflictError,
            AuthenticationError,
            AuthorizationError,
            ConfigurationError,
        ):
            assert issubclass(cls, SaarthiError)
