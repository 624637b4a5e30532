"""Configuration for Coin Runner."""

from .settings import Settings, DisplaySettings, AudioSettings, get_settings

__all__ = ["Settings", "DisplaySettings", "AudioSettings", "get_settings"]
