"""Server configuration via pydantic-settings."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Build output directory to serve
    ROOT_DIR: str = "./dist"

    LOG_LEVEL: str = "info"

    @property
    def root_path(self) -> Path:
        return Path(self.ROOT_DIR)


def build_settings(**overrides) -> Settings:
    """Build settings, applying explicit overrides and making ROOT_DIR absolute."""
    s = Settings(**{k: v for k, v in overrides.items() if v is not None})
    if not os.path.isabs(s.ROOT_DIR):
        s.ROOT_DIR = os.path.abspath(s.ROOT_DIR)
    return s


settings = build_settings()
