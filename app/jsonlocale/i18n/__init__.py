"""i18n system - translation resolution engine.

Resolves translated strings by dot-notation key from layered JSON (or YAML)
documents, with language fallback and case-aware placeholder substitution.

Main components:
- models: TranslationTree, LanguageInfo, LanguageResolutionContext
- key_path: dot-notation lookup
- merger: deep merge with override precedence
- placeholders: ":name" substitution
- cache: ResolutionCache for merged catalogs
- loader: File and resource document providers
- catalog: LanguageCatalog for available languages
- resolvers: system language detection and LanguageResolver
- translator: Translator orchestrating all of the above
"""

from jsonlocale.i18n.cache import ResolutionCache
from jsonlocale.i18n.catalog import LanguageCatalog
from jsonlocale.i18n.factory import create_translator
from jsonlocale.i18n.key_path import MISSING, parse_key, resolve_key
from jsonlocale.i18n.loader import (
    FileLocalizationProvider,
    LocalizationProvider,
    ResourceLocalizationProvider,
    create_provider,
)
from jsonlocale.i18n.merger import deep_merge, merge_all
from jsonlocale.i18n.models import (
    LanguageInfo,
    LanguageResolutionContext,
    TranslationTree,
)
from jsonlocale.i18n.placeholders import substitute
from jsonlocale.i18n.resolvers import LanguageResolver, detect_system_languages
from jsonlocale.i18n.translator import Translator

__all__ = [
    "MISSING",
    "FileLocalizationProvider",
    "LanguageCatalog",
    "LanguageInfo",
    "LanguageResolutionContext",
    "LanguageResolver",
    "LocalizationProvider",
    "ResolutionCache",
    "ResourceLocalizationProvider",
    "TranslationTree",
    "Translator",
    "create_provider",
    "create_translator",
    "deep_merge",
    "detect_system_languages",
    "merge_all",
    "parse_key",
    "resolve_key",
    "substitute",
]
