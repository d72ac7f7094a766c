"""Application settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gifnar.storage.entries import STORAGE_KEY


def _default_data_dir() -> Path:
    """Get the default data directory.

    Uses XDG_DATA_HOME if set, otherwise ~/.local/share/gifnar
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        base = Path(xdg_data)
    else:
        base = Path.home() / ".local" / "share"
    return base / "gifnar"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIFNAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(default_factory=_default_data_dir)
    export_dir: Path = Path(".")
    storage_key: str = STORAGE_KEY


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
