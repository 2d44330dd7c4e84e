"""Tests for the shared Supabase client."""

import pytest
from unittest.mock import patch, MagicMock

from shared.config import Settings
from shared.database import get_supabase_client, reset_client_cache
from shared.exceptions import ConfigurationError


def _settings(**overrides) -> Settings:
    values = {
        "supabase_url": "https://saarthi.supabase.co",
        "supabase_service_role_key": "service-key",
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def create_client():
    with patch("shared.database.create_client") as mock_create:
        mock_create.side_effect = lambda url, key: MagicMock(name=f"client:{url}")
        yield mock_create


class TestGetSupabaseClient:
    def test_connects_with_service_role_key(self, create_client):
        with patch("shared.database.get_settings", return_value=_settings()):
            get_supabase_client()

        create_client.assert_called_once_with("https://saarthi.supabase.co", "service-key")

    def test_one_client_per_process(self, create_client):
        with patch("shared.database.get_settings", return_value=_settings()):
            assert get_supabase_client() is get_supabase_client()

        assert create_client.call_count == 1

    def test_reset_reconnects(self, create_client):
        with patch("shared.database.get_settings", return_value=_settings()):
            first = get_supabase_client()
            reset_client_cache()
            second = get_supabase_client()

        assert first is not second

    @pytest.mark.parametrize("overrides, missing", [
        ({"supabase_url": ""}, ["SAARTHI_SUPABASE_URL"]),
        ({"supabase_service_role_key": ""}, ["SAARTHI_SUPABASE_SERVICE_ROLE_KEY"]),
        (
            {"supabase_url": "", "supabase_service_role_key": ""},
            ["SAARTHI_SUPABASE_URL", "SAARTHI_SUPABASE_SERVICE_ROLE_KEY"],
        ),
    ])
    def test_missing_configuration(self, create_client, overrides, missing):
        with patch("shared.database.get_settings", return_value=_settings(**overrides)):
            with pytest.raises(ConfigurationError) as exc_info:
                get_supabase_client()

        assert exc_info.value.details == {"missing": missing}
        create_client.assert_not_called()
