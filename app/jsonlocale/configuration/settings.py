"""Library settings aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonlocale.configuration.localization import LocalizationSettings


class Settings(BaseSettings):
    """Top-level settings for jsonlocale.

    Holds the logging switches and the ``localization`` section that
    create_translator() uses when it is called without an explicit config.

    Environment Variables:
        LOG_LEVEL: Level of the "jsonlocale" logger (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: 'production' switches log rendering to JSON lines

    Example:
        ```python
        from jsonlocale.configuration import settings

        if settings.localization.lang_dir is None:
            ...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    localization: LocalizationSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        # Sections read their own environment variables
        if "localization" not in kwargs:
            kwargs["localization"] = LocalizationSettings()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when ENVIRONMENT is 'production' (any case)."""
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
