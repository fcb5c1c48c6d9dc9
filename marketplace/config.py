"""Client settings loaded from the environment (prefix ``MARKETPLACE_``)."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://rocketseat-mba-marketplace.herokuapp.com"


def _default_token_path() -> Path:
    return Path.home() / ".marketplace" / "token"


class Settings(BaseSettings):
    """Marketplace client settings."""
    model_config = SettingsConfigDict(
        env_prefix="MARKETPLACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = 10.0
    token_path: Path = Field(default_factory=_default_token_path)
    log_level: str = "INFO"

    # local stub server (uvicorn stub_server.main:app)
    stub_host: str = "127.0.0.1"
    stub_port: int = 8085


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
