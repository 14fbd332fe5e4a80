"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_planner.domain.plans import DEFAULT_TRAINER_NAME

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_ASSETS_DIR = Path(__file__).resolve().parent / "assets"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    logo_path: Path = _ASSETS_DIR / "logo.svg"
    background_path: Path = _ASSETS_DIR / "background.png"
    background_opacity: float = Field(default=0.12, ge=0.0, le=1.0)
    brand_name: str = "G-FORCE"
    default_trainer_name: str = DEFAULT_TRAINER_NAME
    footer_tagline: str = "Fuel Your Power"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
