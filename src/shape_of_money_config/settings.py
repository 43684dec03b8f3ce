"""Engine settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. SHAPE_OF_MONEY_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production

Uses pydantic-settings for automatic type coercion and validation.
All variables carry the SHAPE_OF_MONEY_ prefix, e.g.
SHAPE_OF_MONEY_AMOUNT_TO_AREA_SCALE=60.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SHAPE_OF_MONEY_ENV_FILE env var (full or project-relative path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("SHAPE_OF_MONEY_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="SHAPE_OF_MONEY_",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Geometry (area = amount * scale, every side >= min_item_size)
    amount_to_area_scale: float = 60.0
    min_item_size: float = 1.0

    # Treemap
    treemap_aspect_min: float = 0.25
    treemap_aspect_max: float = 4.0
    treemap_padding: float = 0.0
    treemap_round_coordinates: bool = False

    # Summary artifacts
    summary_offset_x: float = 200.0
    summary_width: float = 300.0
    summary_height: float = 200.0
    savings_item_gap: float = 20.0

    # Allocation links
    remainder_link_length: float = 120.0
    allocation_tolerance: float = 0.005

    # Synchronization
    max_sync_passes: int = 10

    @field_validator("amount_to_area_scale", "min_item_size")
    @classmethod
    def _validate_positive(cls, v: float) -> float:
        if v <= 0:
            msg = "Geometry constants must be positive"
            raise ValueError(msg)
        return v

    @field_validator("max_sync_passes")
    @classmethod
    def _validate_passes(cls, v: int) -> int:
        if v < 1:
            msg = "max_sync_passes must be at least 1"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def _validate_aspect_bounds(self) -> Settings:
        if self.treemap_aspect_min <= 0 or self.treemap_aspect_max <= 0:
            msg = "Treemap aspect bounds must be positive"
            raise ValueError(msg)
        if self.treemap_aspect_min > self.treemap_aspect_max:
            msg = "treemap_aspect_min must not exceed treemap_aspect_max"
            raise ValueError(msg)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return cached engine settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
