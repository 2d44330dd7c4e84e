"""
Centralized configuration for the Saarthi backend.

All settings are loaded from environment variables (prefixed with SAARTHI_)
with sensible defaults. The signing secret is the one value without a usable
default: it must be supplied in every environment except tests.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


# Only ever used when SAARTHI_ENVIRONMENT=test and no secret is configured.
TEST_JWT_SECRET = "saarthi-test-secret-not-for-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SAARTHI_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Saarthi API"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 30

    # Feature Flags
    enable_legacy_routes: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_test(self) -> bool:
        return self.environment.lower() == "test"

    def resolve_jwt_secret(self) -> str:
        """
        Return the token signing secret.

        Raises:
            ConfigurationError: If no secret is configured outside tests.
        """
        if self.jwt_secret:
            return self.jwt_secret
        if self.is_test:
            return TEST_JWT_SECRET
        raise ConfigurationError(
            "SAARTHI_JWT_SECRET is not set. "
            "Refusing to start without a token signing secret.",
            details={"setting": "SAARTHI_JWT_SECRET"},
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
