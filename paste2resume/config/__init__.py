"""Configuration management."""

from .settings import AISettings, RenderSettings, Settings, get_settings

__all__ = ["AISettings", "RenderSettings", "Settings", "get_settings"]
