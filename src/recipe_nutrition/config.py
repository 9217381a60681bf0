"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

CATALOG_CANDIDATES = (
    "food_database.json",
    "data/food_database.json",
    "FoodDatabase.json",
    "data/FoodDatabase.json",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    food_catalog_path: str | None = None
    admin_token: str | None = None
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_catalog_path(settings: Settings, base_dir: Path | None = None) -> Path:
    """Return the configured catalog path or the first candidate that exists."""
    root = base_dir or Path.cwd()
    if settings.food_catalog_path:
        explicit = Path(settings.food_catalog_path).expanduser()
        return explicit if explicit.is_absolute() else root / explicit
    candidates = [root / candidate for candidate in CATALOG_CANDIDATES]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[0]
