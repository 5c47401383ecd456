"""
Configuration Management.

Configuration sources (in order of precedence):
1. Environment variables (YTPARSE_ prefix)
2. .env file
3. Default values

Example:
    from ytparse.config import get_settings

    base_url = get_settings().base_url
"""

from ytparse.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
