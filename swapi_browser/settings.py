from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the film catalog browser.

    Values are loaded from environment variables and `.env`.

    Notes:
    - SWAPI_HTTP_TIMEOUT unset means requests wait indefinitely.
    - Logs go to a file only; the terminal belongs to the prompts.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Upstream API
    SWAPI_BASE_URL: str = Field(default="https://swapi.py4e.com/api", min_length=8)
    SWAPI_HTTP_TIMEOUT: float | None = Field(default=None, gt=0)
    # Thread pool size for resolving a film's sub-resources.
    SWAPI_MAX_WORKERS: int = Field(default=8, ge=1, le=64)

    # Diagnostic logging
    SWAPI_LOG_DIR: Path = Field(default=Path("_logs"))
    SWAPI_LOG_LEVEL: str = Field(default="WARNING")
    SWAPI_LOG_BACKUP_COUNT: int = Field(default=7, ge=0)


def load_settings(**overrides) -> Settings:
    s = Settings(**overrides)
    s.SWAPI_BASE_URL = s.SWAPI_BASE_URL.rstrip("/")
    return s
