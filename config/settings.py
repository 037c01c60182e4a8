"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Window and frame pacing settings."""

    model_config = SettingsConfigDict(env_prefix="NEONFLAP_DISPLAY_", extra="ignore")

    # Rendering
    fps: int = Field(default=60, ge=1, le=240)
    scale: int = Field(default=2, ge=1, le=4)  # Window pixels per logical pixel

    fullscreen: bool = False
    title: str = "NEON FLAP"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEONFLAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_file: Optional[Path] = None

    # Initial visual theme
    theme: Literal["neon", "retro"] = "neon"

    # Single best-score slot
    best_score_path: Path = Field(
        default_factory=lambda: Path.home() / ".neonflap" / "best.json"
    )
    # False keeps the best score in memory only (no file reads or writes)
    persist_best: bool = True

    audio_enabled: bool = True

    # Optional YAML palette overrides (<themes_path>/<theme>.yaml)
    themes_path: Optional[Path] = None

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
