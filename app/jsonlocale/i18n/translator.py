"""Translation service for resolving and interpolating translated strings.

Core component of the i18n system: owns the active language, the ordered
list of translation sources and the merged-catalog cache.
"""

import copy
import json
import threading
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

from jsonlocale.configuration import LocalizationSettings
from jsonlocale.i18n.cache import ResolutionCache
from jsonlocale.i18n.catalog import LanguageCatalog
from jsonlocale.i18n.key_path import MISSING, resolve_key
from jsonlocale.i18n.loader import Location, LocalizationProvider, create_provider
from jsonlocale.i18n.merger import deep_merge
from jsonlocale.i18n.models import LanguageInfo, TranslationTree
from jsonlocale.i18n.placeholders import substitute
from jsonlocale.i18n.resolvers import LanguageResolver, detect_system_languages
from jsonlocale.logging import get_module_logger

logger = get_module_logger()

MERGED_CACHE_PREFIX = "merged_"


def stringify(value: Any) -> str:
    """Render a resolved translation value as text.

    Strings are returned unchanged, booleans as "true"/"false", numbers with
    str() and mappings or lists as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        return json.dumps(dict(value.items()), ensure_ascii=False, default=_json_default)
    return json.dumps(value, ensure_ascii=False, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value.items())
    return str(value)


class Translator:
    """Service for translating keys with fallback and placeholder support.

    Translations are merged from several sources, lowest priority first:
    the optional default source, the primary source, then every source added
    with add_source(). Lookups that miss in the active language are retried
    in the fallback language.

    Lookups are lock-free and always see a fully built catalog. Mutations
    (add_source, set_language, clear_cache) are serialized and rebuild the
    active catalog before returning.

    Attributes:
        config: Localization settings this translator was built from.
        provider: Provider used to read translation documents.
    """

    def __init__(
        self,
        config: Optional[LocalizationSettings] = None,
        *,
        provider: Optional[LocalizationProvider] = None,
        detected_languages: Optional[Sequence[str]] = None,
    ):
        """Initialize Translator.

        Args:
            config: Localization settings (default: read from environment).
            provider: Document provider (default: chosen from config).
            detected_languages: Candidate tags from the platform, best first
                (default: detected from the host environment).

        Raises:
            LocalizationConfigError: If the configured mode has no source.
            TranslationLoadError: If a document of the initial language is
                malformed.
        """
        self.config = config if config is not None else LocalizationSettings()
        self.config.validate_sources()

        self.provider = provider or create_provider(self.config)
        self._cache = ResolutionCache()
        self._additional_sources: List[Location] = []
        self._lock = threading.RLock()

        if detected_languages is None:
            detected_languages = detect_system_languages()

        resolver = LanguageResolver(self._has_primary_document)
        self._current_language = resolver.resolve(
            self.config.default_lang,
            detected_languages,
            self.config.fallback_lang,
        )
        self._active_catalog()

        logger.info(
            "initialized_translator",
            language=self._current_language,
            fallback_language=self.fallback_language,
            use_resources=self.config.use_resources,
        )

    @property
    def current_language(self) -> str:
        """The active language tag."""
        return self._current_language

    @property
    def fallback_language(self) -> Optional[str]:
        """The configured fallback language tag, if any."""
        return self.config.fallback_lang

    @property
    def sources(self) -> Tuple[Location, ...]:
        """Registered source locations in merge order, lowest priority first.

        default_lang_dir is a directory on disk and is only layered in file
        mode.
        """
        locations: List[Location] = []
        if self.config.default_lang_dir is not None and not self.config.use_resources:
            locations.append(self.config.default_lang_dir)
        locations.append(self.config.primary_location)
        locations.extend(tuple(self._additional_sources))
        return tuple(locations)

    def lang(self, key: str, replacements: Optional[Mapping[str, Any]] = None) -> str:
        """Retrieve and interpolate a translated string.

        Args:
            key: Dot-notation key, e.g. "site.title".
            replacements: Optional placeholder values, e.g. {"name": "john"}.

        Returns:
            The translated string, or "" if the key is not found in the
            active or fallback language.

        Raises:
            TranslationLoadError: If a document needed for the lookup is
                malformed.
        """
        if not key:
            return ""

        value = self._lookup(key)
        if value is MISSING:
            logger.debug(
                "translation_not_found",
                key=key,
                language=self._current_language,
                fallback_language=self.fallback_language,
            )
            return ""

        text = stringify(value)
        if replacements:
            text = substitute(text, replacements)
        return text

    def has(self, key: str) -> bool:
        """Check whether a key resolves in the active or fallback language."""
        if not key:
            return False
        return self._lookup(key) is not MISSING

    def add_source(self, location: Location) -> "Translator":
        """Add a source whose translations override all earlier ones.

        Args:
            location: Directory (file mode) or resource directory (resource
                mode). Blank values are ignored.

        Returns:
            This translator, for chaining.
        """
        if location is None or not str(location).strip():
            return self

        with self._lock:
            self._additional_sources.append(location)
            self._cache.invalidate()
            self._active_catalog()

        logger.info(
            "translation_source_added",
            location=str(location),
            source_count=len(self._additional_sources),
        )
        return self

    def set_language(self, language: str) -> None:
        """Switch the active language and rebuild its catalog.

        Args:
            language: Language tag. Blank values are ignored.
        """
        if not language or not language.strip():
            return

        with self._lock:
            previous = self._current_language
            self._current_language = language
            self._cache.invalidate()
            self._active_catalog()

        logger.info("language_changed", previous=previous, language=language)

    def clear_cache(self) -> None:
        """Drop every cached catalog and rebuild the active one."""
        with self._lock:
            self._cache.invalidate()
            self._active_catalog()
        logger.info("translation_cache_cleared", language=self._current_language)

    def get_available_languages(self) -> List[LanguageInfo]:
        """List languages found in the primary source, sorted by display name."""
        catalog = LanguageCatalog(self.provider, self.config.primary_location)
        return catalog.list_available()

    def get_catalog(self, language: Optional[str] = None) -> TranslationTree:
        """Return a copy of the merged catalog for a language.

        Args:
            language: Language tag (default: the active one).

        Returns:
            A deep copy; changing it does not affect later lookups.
        """
        return copy.deepcopy(self._merged_catalog(language or self._current_language))

    def _lookup(self, key: str) -> Any:
        language = self._current_language
        value = resolve_key(self._merged_catalog(language), key)
        if value is not MISSING and value is not None:
            return value

        fallback = self.fallback_language
        if fallback and fallback.lower() != language.lower():
            value = resolve_key(self._merged_catalog(fallback), key)
            if value is not MISSING and value is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_language=language,
                    fallback_language=fallback,
                )
                return value
        return MISSING

    def _active_catalog(self) -> TranslationTree:
        return self._merged_catalog(self._current_language)

    def _merged_catalog(self, language: str) -> TranslationTree:
        return self._cache.get_or_load(
            f"{MERGED_CACHE_PREFIX}{language}",
            lambda: self._build_catalog(language),
        )

    def _build_catalog(self, language: str) -> TranslationTree:
        merged = None
        for location in self.sources:
            merged = deep_merge(merged, self._load_source(location, language))
        logger.info(
            "built_merged_catalog",
            language=language,
            key_count=len(merged),
        )
        return merged

    def _load_source(self, location: Location, language: str) -> Optional[TranslationTree]:
        identifier = self.provider.source_identifier(location, language)
        if self.provider.exists(identifier):
            return self.provider.load_all(identifier)

        fallback = self.fallback_language
        if fallback and fallback.lower() != language.lower():
            fallback_identifier = self.provider.source_identifier(location, fallback)
            if self.provider.exists(fallback_identifier):
                logger.debug(
                    "source_language_fallback",
                    location=str(location),
                    language=language,
                    fallback_language=fallback,
                )
                return self.provider.load_all(fallback_identifier)
        return None

    def _has_primary_document(self, language: str) -> bool:
        identifier = self.provider.source_identifier(
            self.config.primary_location, language
        )
        return self.provider.exists(identifier)
