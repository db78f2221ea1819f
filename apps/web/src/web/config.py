"""Configuration for the user directory client."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file (ENV_FILE, else apps/web/.env)."""
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    web_dir = Path(__file__).parent.parent.parent
    return str(web_dir / ".env")


class WebSettings(BaseSettings):
    """Client settings from environment variables."""

    api_url: str = "http://localhost:8000"
    request_timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_web_settings() -> WebSettings:
    """Get client settings."""
    return WebSettings()
