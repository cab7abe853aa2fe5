"""Configuration for docview."""

from docview.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
