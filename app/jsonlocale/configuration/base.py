"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LibrarySettings(BaseSettings):
    """Base class for localization library settings.

    All settings sections inherit from this class to ensure consistent
    configuration behavior (env file loading, case sensitivity). Fields can
    be passed either by their environment alias or by their field name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
