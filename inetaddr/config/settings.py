"""
inetaddr Settings
Pydantic-based configuration with support for env vars and config files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name: str = Field(default="inetaddr", alias="APP_NAME")
    env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AddressSettings(BaseSettings):
    """Address modelling settings."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage used when an address is built without an explicit backend
    backend: Literal["text", "socket"] = Field(default="text", alias="ADDRESS_BACKEND")

    @field_validator("backend", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class Settings(BaseSettings):
    """
    Main settings class that aggregates all config sections.

    Usage:
        from inetaddr.config import get_settings

        settings = get_settings()
        print(settings.app.log_level)
        print(settings.address.backend)
    """

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sub-settings
    app: AppSettings = Field(default_factory=AppSettings)
    address: AddressSettings = Field(default_factory=AddressSettings)

    def __init__(self, **data):
        super().__init__(**data)
        # Initialize sub-settings with same env source
        self.app = AppSettings()
        self.address = AddressSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: The application settings
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings (clears cache).

    Returns:
        Settings: Fresh settings instance
    """
    get_settings.cache_clear()
    return get_settings()
