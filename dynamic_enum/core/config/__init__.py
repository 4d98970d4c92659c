"""Configuration module for dynamic_enum.

Provides centralized configuration management with type-safe enums.

Usage:
    from dynamic_enum.core.config import settings, ColourSourceType

    if settings.COLOUR_SOURCE == ColourSourceType.FILE:
        ...
"""

from dynamic_enum.core.config.enums import ColourSourceType, Environment
from dynamic_enum.core.config.settings import Settings

__all__ = [
    "Settings",
    "ColourSourceType",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
