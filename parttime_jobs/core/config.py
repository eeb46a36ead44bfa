"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local persistence (stands in for browser localStorage)
    storage_dir: Path = Path(".ptj_storage")
    storage_prefix: str = "ptj"

    # Backend API stub
    api_base_url: str = ""

    # Artificial latency of the mocked calls (seconds)
    auth_delay_seconds: float = 1.2
    job_post_delay_seconds: float = 0.8
    profile_sync_delay_seconds: float = 0.5

    # Text generation (OpenAI-compatible)
    text_generation_api_key: str = ""
    text_generation_base_url: str = "https://api.deepseek.com/v1"
    text_generation_model: str = "deepseek-chat"

    # Mock JWT
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Auth behaviour for non-demo logins
    accept_unverified_logins: bool = False

    # App
    prefer_dark_mode: bool = False
    log_level: str = "INFO"

    @property
    def resolved_api_base_url(self) -> str:
        """Backend URL, falling back to the local development server."""
        return self.api_base_url or "http://localhost:3001"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
