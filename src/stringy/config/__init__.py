"""Configuration module using Pydantic Settings.

Usage:
    from stringy.config import get_settings

    settings = get_settings()
    settings.default_encoding  # "UTF-8"
"""

from stringy.config.settings import StringySettings, configure, get_settings

__all__ = [
    "StringySettings",
    "configure",
    "get_settings",
]
