"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    dashline_env: str = "development"
    dashline_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Dasher defaults (see engine.config.DasherConfig)
    dashline_duplicate_odd_patterns: bool = False
    dashline_consumed_index_parity: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
