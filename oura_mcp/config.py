"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from oura_mcp.errors import ConfigurationError

DEFAULT_API_BASE = "https://api.ouraring.com/v2/usercollection"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Oura
    oura_token: str = ""
    oura_api_base: str = DEFAULT_API_BASE
    # None means no timeout: a hung upstream call hangs the invocation
    oura_timeout_seconds: float | None = None

    # Logging
    log_level: str = "INFO"

    # HTTP transport
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    # Shared bearer token for /manifest and /execute (empty = dev mode)
    service_auth_token: str = ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def require_token(settings: Settings) -> str:
    """Return the Oura bearer token or raise if it is not configured."""
    token = settings.oura_token.strip()
    if not token:
        raise ConfigurationError("OURA_TOKEN environment variable must be set")
    return token
