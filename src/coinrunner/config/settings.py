"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Gameplay tuning lives in code; only the shell around it is configurable.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Window and rendering settings."""

    width: int = Field(default=960, gt=0)
    height: int = Field(default=540, gt=0)
    fps: int = Field(default=60, ge=1, le=240)
    fullscreen: bool = False
    title: str = "Coin Runner"


class AudioSettings(BaseSettings):
    """Sound effect settings."""

    enabled: bool = True
    volume: float = Field(default=1.0, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="COINRUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Which spawn policy drives a session
    spawn_policy: Literal["timed", "probability"] = "timed"

    # Optional log file (console logging is always on)
    log_file: Optional[Path] = None

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
