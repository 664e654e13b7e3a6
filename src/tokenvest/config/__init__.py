"""Configuration module for TokenVest.

Usage:
    from tokenvest.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.app_name)
"""

from tokenvest.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
