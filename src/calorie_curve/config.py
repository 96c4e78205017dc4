"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    generator_timeout_seconds: float = 30.0
    ml_density_g_per_ml: float = 1.0
    cors_origins: str | None = None
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3001
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS allow-list; empty means any origin."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
