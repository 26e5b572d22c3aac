"""
inetaddr Configuration Module
Centralized configuration management using pydantic-settings.
"""

from inetaddr.config.settings import (
    AddressSettings,
    AppSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "AddressSettings",
    "AppSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
