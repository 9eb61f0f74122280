# argus/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "argus"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- Storage ---
    storage_backend: Literal["database", "memory"] = "database"
    database_url: str = "sqlite+aiosqlite:///./argus.db"
    repository_timeout_seconds: Optional[float] = Field(None, gt=0)

    # --- Audit vocabulary ---
    enums_config_path: Optional[str] = "configs/enums.yaml"

    # --- Pagination ---
    default_page_size: int = Field(50, gt=0)
    max_page_size: int = Field(1000, gt=0)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
