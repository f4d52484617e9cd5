"""Translation models for the i18n system.

Defines core data structures for translation trees, languages and language
determination.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from requests.structures import CaseInsensitiveDict

# A nested mapping with case-insensitive keys whose leaves are strings,
# numbers, booleans, None or lists.
TranslationTree = CaseInsensitiveDict

ULTIMATE_DEFAULT_LANGUAGE = "en"
META_KEY = "_meta_"
LANGUAGE_NAME_KEY = "language_name"
LANGUAGES_DOCUMENT = "languages"


def as_tree(value: Any) -> Any:
    """Convert parsed document data into a TranslationTree.

    Mappings at any depth (including inside lists) become case-insensitive
    trees; every other value is returned unchanged.

    Args:
        value: Parsed JSON/YAML value.

    Returns:
        The converted value.
    """
    if isinstance(value, Mapping):
        tree = CaseInsensitiveDict()
        for key, item in value.items():
            tree[str(key)] = as_tree(item)
        return tree
    if isinstance(value, list):
        return [as_tree(item) for item in value]
    return value


@dataclass(frozen=True)
class LanguageInfo:
    """A language available for selection, e.g. in a dropdown.

    Attributes:
        code: Language code as used in document names (e.g. "de", "en_US").
        display_name: Human-readable name (e.g. "Deutsch").
    """

    code: str
    display_name: str

    def __str__(self) -> str:
        return f"{self.display_name} ({self.code})"


@dataclass
class LanguageResolutionContext:
    """Inputs for choosing the active language.

    Resolution order:
    1. Requested language (if a source exists for it)
    2. First detected candidate with a source
    3. Fallback language
    4. Ultimate default ("en")

    Attributes:
        requested: Explicitly configured language, if any.
        detected: Candidate tags from the host environment, best first.
        fallback: Configured fallback language, if any.
        default: Language used when nothing else applies.
    """

    requested: Optional[str] = None
    detected: Sequence[str] = field(default_factory=list)
    fallback: Optional[str] = None
    default: str = ULTIMATE_DEFAULT_LANGUAGE

    def candidates(self) -> List[str]:
        """Tags that are only accepted when a source exists for them."""
        ordered = []
        if self.requested and self.requested.strip():
            ordered.append(self.requested)
        ordered.extend(tag for tag in self.detected if tag and tag.strip())
        return ordered

    def resolve(self, has_source: Callable[[str], bool]) -> str:
        """Resolve the best language given a source-existence check.

        Args:
            has_source: Returns True when a document exists for a tag.

        Returns:
            The chosen, non-empty language tag.
        """
        for tag in self.candidates():
            if has_source(tag):
                return tag
        if self.fallback and self.fallback.strip():
            return self.fallback
        return self.default
