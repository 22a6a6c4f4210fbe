"""FastAPI dependency injection."""

from __future__ import annotations

from dashline.config import Settings, settings
from dashline.engine.config import DasherConfig


def get_settings() -> Settings:
    return settings


def get_dasher_config() -> DasherConfig:
    return DasherConfig.from_settings(settings)
