"""Translation source settings."""

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import Field, field_validator

from jsonlocale.configuration.base import LibrarySettings
from jsonlocale.exceptions import LocalizationConfigError


class LocalizationSettings(LibrarySettings):
    """Where translations come from and which languages to prefer.

    Two source modes are supported:

    - **file** (default): documents live in ``lang_dir`` on disk, e.g.
      ``lang/en.json``, ``lang/de.json``.
    - **resources**: documents ship inside an importable Python package and
      are read with ``importlib.resources``; ``resource_prefix`` is the
      directory inside that package (e.g. ``"lang"``).

    Environment Variables:
        LOCALIZATION_LANG_DIR: Base directory for translation files
        LOCALIZATION_DEFAULT_LANG: Explicit language code (default: detect)
        LOCALIZATION_FALLBACK_LANG: Language consulted for missing keys (default: en)
        LOCALIZATION_DEFAULT_LANG_DIR: Optional base layer under LANG_DIR (file mode only)
        LOCALIZATION_USE_RESOURCES: Read documents from a package (default: False)
        LOCALIZATION_RESOURCE_PACKAGE: Package holding the documents
        LOCALIZATION_RESOURCE_PREFIX: Directory inside the package (default: root)
        LOCALIZATION_DOCUMENT_FORMAT: 'json' or 'yaml' (default: json)

    Example:
        ```python
        from jsonlocale.configuration import LocalizationSettings

        config = LocalizationSettings(lang_dir="lang", default_lang="de")
        config.validate_sources()
        ```
    """

    lang_dir: Optional[Path] = Field(
        default=None,
        alias="LOCALIZATION_LANG_DIR",
        description="Base directory for translation files (file mode)",
    )
    default_lang: Optional[str] = Field(
        default=None,
        alias="LOCALIZATION_DEFAULT_LANG",
        description="Explicit language code; detected from the system when unset",
    )
    fallback_lang: Optional[str] = Field(
        default="en",
        alias="LOCALIZATION_FALLBACK_LANG",
        description="Language consulted when the active one lacks a key or document",
    )
    default_lang_dir: Optional[Path] = Field(
        default=None,
        alias="LOCALIZATION_DEFAULT_LANG_DIR",
        description="Optional base translations merged underneath lang_dir (file mode only)",
    )
    use_resources: bool = Field(
        default=False,
        alias="LOCALIZATION_USE_RESOURCES",
        description="Load documents from package resources instead of files",
    )
    resource_package: Optional[str] = Field(
        default=None,
        alias="LOCALIZATION_RESOURCE_PACKAGE",
        description="Importable package that ships the translation documents",
    )
    resource_prefix: str = Field(
        default="",
        alias="LOCALIZATION_RESOURCE_PREFIX",
        description="Directory inside resource_package holding the documents",
    )
    document_format: Literal["json", "yaml"] = Field(
        default="json",
        alias="LOCALIZATION_DOCUMENT_FORMAT",
        description="Translation document format: 'json' or 'yaml'",
    )

    @field_validator(
        "lang_dir",
        "default_lang",
        "fallback_lang",
        "default_lang_dir",
        "resource_package",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value):
        """Treat empty and whitespace-only values as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def primary_location(self) -> Union[Path, str]:
        """Location of the primary translation source for the active mode."""
        if self.use_resources:
            return self.resource_prefix
        return self.lang_dir

    def validate_sources(self) -> None:
        """Fail fast when the selected mode has no source location.

        Raises:
            LocalizationConfigError: If file mode has no lang_dir, or resource
                mode has no resource_package.
        """
        if self.use_resources:
            if not self.resource_package:
                raise LocalizationConfigError(
                    "resource_package is required when use_resources is enabled"
                )
        elif self.lang_dir is None:
            raise LocalizationConfigError(
                "lang_dir is required when use_resources is disabled"
            )
