"""Language detection and determination.

Provides the host-environment language candidates and the logic that picks
the active language from configuration, detection and fallbacks.
"""

import locale
import os
from typing import Callable, List, Mapping, Optional, Sequence

from jsonlocale.i18n.models import LanguageResolutionContext
from jsonlocale.logging import get_module_logger

logger = get_module_logger()

LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def tag_variants(locale_name: str) -> List[str]:
    """Expand a locale name into the tags a document may be named after.

    "de_DE.UTF-8" -> ["de_DE", "de", "de-DE"]

    Args:
        locale_name: POSIX locale or language tag.

    Returns:
        Candidate tags, most specific first, without duplicates.
    """
    name = locale_name.split(".", 1)[0].split("@", 1)[0].strip()
    if not name or name.upper() in ("C", "POSIX"):
        return []

    underscored = name.replace("-", "_")
    language = underscored.split("_", 1)[0].lower()
    variants = [underscored, language, underscored.replace("_", "-")]

    unique = []
    for variant in variants:
        if variant and variant not in unique:
            unique.append(variant)
    return unique


def detect_system_languages(
    environ: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Return language tag candidates from the host environment, best first.

    Looks at LANGUAGE (colon-separated list), LC_ALL, LC_MESSAGES and LANG,
    then at the locale module.

    Args:
        environ: Environment mapping (default: os.environ).

    Returns:
        Candidate tags, possibly empty.
    """
    environ = os.environ if environ is None else environ

    names: List[str] = []
    for var in LOCALE_ENV_VARS:
        value = environ.get(var)
        if value:
            names.extend(part for part in value.split(":") if part)

    if not names:
        try:
            current = locale.getlocale()[0]
        except ValueError:
            current = None
        if current:
            names.append(current)

    candidates: List[str] = []
    for name in names:
        for variant in tag_variants(name):
            if variant not in candidates:
                candidates.append(variant)

    logger.debug("detected_system_languages", candidates=candidates)
    return candidates


class LanguageResolver:
    """Chooses the active language.

    Implements the fallback chain:
    1. Explicitly configured language, if a document exists for it
    2. Detected candidates, in order, if a document exists
    3. Fallback language
    4. Default language ("en")
    """

    def __init__(self, has_source: Callable[[str], bool]):
        """Initialize language resolver.

        Args:
            has_source: Returns True when a primary document exists for a tag.
        """
        self.has_source = has_source

    def resolve(
        self,
        requested: Optional[str],
        detected: Sequence[str],
        fallback: Optional[str],
    ) -> str:
        """Resolve the active language.

        Args:
            requested: Configured language, if any.
            detected: Candidate tags from the platform, best first.
            fallback: Configured fallback language, if any.

        Returns:
            A non-empty language tag.
        """
        context = LanguageResolutionContext(
            requested=requested,
            detected=list(detected),
            fallback=fallback,
        )
        resolved = context.resolve(self.has_source)
        log = logger.bind(language=resolved, requested=requested)
        if requested and resolved != requested:
            log.warning("requested_language_unavailable", detected=list(detected))
        log.info("language_determined")
        return resolved
