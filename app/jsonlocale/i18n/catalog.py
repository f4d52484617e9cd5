"""Enumeration of available languages and their display names."""

from typing import Callable, Dict, List, Optional

from babel import Locale, UnknownLocaleError
from requests.structures import CaseInsensitiveDict

from jsonlocale.exceptions import TranslationLoadError
from jsonlocale.i18n.loader import Location, LocalizationProvider
from jsonlocale.i18n.models import LANGUAGES_DOCUMENT, LanguageInfo
from jsonlocale.logging import get_module_logger

logger = get_module_logger()


def native_language_name(code: str) -> Optional[str]:
    """Look up a language's name in its own language via Babel.

    Args:
        code: Language tag such as "de", "pt_BR" or "pt-BR".

    Returns:
        The native display name (e.g. "Deutsch"), or None if Babel does not
        know the code.
    """
    try:
        return Locale.parse(code.replace("-", "_")).get_display_name()
    except (UnknownLocaleError, ValueError, TypeError):
        return None


class LanguageCatalog:
    """Lists the languages available in a translation source.

    Display names are resolved in this order:
    1. The ``languages`` document (code -> name map), if present
    2. The language document's ``_meta_.language_name``
    3. The platform's native name for the code (Babel)
    4. The uppercased code

    Attributes:
        provider: Provider used to read documents.
        location: Source location whose documents are listed.
    """

    def __init__(
        self,
        provider: LocalizationProvider,
        location: Location,
        name_lookup: Callable[[str], Optional[str]] = native_language_name,
    ):
        self.provider = provider
        self.location = location
        self.name_lookup = name_lookup

    def load_language_names(self) -> Optional[Dict[str, str]]:
        """Load the ``languages`` document as a case-insensitive map.

        Returns:
            Map of code to display name, or None when the document is absent
            or unreadable.
        """
        identifier = self.provider.source_identifier(self.location, LANGUAGES_DOCUMENT)
        if not self.provider.exists(identifier):
            return None
        try:
            data = self.provider.load_all(identifier)
        except TranslationLoadError as e:
            logger.warning("language_names_unavailable", source=identifier, error=str(e))
            return None

        names = CaseInsensitiveDict()
        for code, name in data.items():
            if isinstance(name, str):
                names[code] = name
        return names

    def language_codes(self, names: Optional[Dict[str, str]] = None) -> List[str]:
        """List language codes found in the source location."""
        codes = [
            code
            for code in self.provider.list_names(self.location)
            if not code.startswith("_") and code.lower() != LANGUAGES_DOCUMENT
        ]
        if not codes and names:
            codes = list(names.keys())
        return codes

    def display_name(self, code: str, names: Optional[Dict[str, str]] = None) -> str:
        """Resolve the display name for one language code."""
        name = names.get(code) if names else None
        if not name:
            identifier = self.provider.source_identifier(self.location, code)
            name = self.provider.get_language_name(identifier)
        if not name:
            name = self.name_lookup(code)
        if not name:
            name = code.upper()
        return name

    def list_available(self) -> List[LanguageInfo]:
        """Return available languages sorted by display name.

        Returns:
            LanguageInfo entries, ordered case-insensitively by display name.
        """
        names = self.load_language_names()
        languages = [
            LanguageInfo(code=code, display_name=self.display_name(code, names))
            for code in self.language_codes(names)
        ]
        languages.sort(key=lambda info: info.display_name.upper())
        logger.info(
            "listed_available_languages",
            location=str(self.location),
            language_count=len(languages),
        )
        return languages
