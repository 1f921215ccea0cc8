"""
Configuration Management.

Centralized configuration using Pydantic Settings.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from clipdeck.config import get_settings

    settings = get_settings()
    endpoint = settings.tikwm_search_url
"""

from clipdeck.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
