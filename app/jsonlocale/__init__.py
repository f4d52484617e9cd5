"""jsonlocale - key-based string translation from layered JSON documents.

Example:
    from jsonlocale import create_translator

    translator = create_translator("lang", default_lang="de")
    translator.lang("site.welcome", {"name": "john"})
"""

from jsonlocale.exceptions import (
    LocalizationConfigError,
    LocalizationError,
    TranslationLoadError,
)
from jsonlocale.i18n import LanguageInfo, Translator, create_translator

__all__ = [
    "LanguageInfo",
    "LocalizationConfigError",
    "LocalizationError",
    "TranslationLoadError",
    "Translator",
    "create_translator",
]
