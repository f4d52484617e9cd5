"""Configuration module - public API.

Provides centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Translation source settings

Example:
    ```python
    from jsonlocale.configuration import settings

    fallback = settings.localization.fallback_lang
    ```
"""

from jsonlocale.configuration.localization import LocalizationSettings
from jsonlocale.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
