"""Application configuration helpers."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime configuration read from environment variables."""

    app_name: str = Field(default="hello-api")
    environment: str = Field(default="local")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="HELLO_API_",
        case_sensitive=False,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings object so the environment is read once."""

    return Settings()
