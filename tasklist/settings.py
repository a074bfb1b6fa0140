#!/usr/bin/env python3
"""
Centralised application settings (AppSettings).

Loaded from environment variables and an optional ``.env`` file so that no
module reads ``os.environ`` on its own.
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Logging
    log_level: str = Field(default="INFO")
    # json|plain
    log_format: str = Field(default="json")

    # Database
    database_path: str = Field(default="data/databases/tasks.db")
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=3, ge=0)
    db_timeout: float = Field(default=30.0, gt=0)

    # Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=9000)
    cors_origins: str = Field(default="http://localhost:3000")
    api_debug: bool = Field(default=False)

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the cached global settings."""
    return AppSettings()
