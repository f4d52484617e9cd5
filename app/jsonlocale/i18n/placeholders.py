"""Case-aware placeholder substitution.

Placeholders look like ``:name``. The case of the placeholder name decides
the case of the inserted value:

    :name  -> value lowercased      ("john")
    :NAME  -> value uppercased      ("JOHN")
    :Name  -> first letter upper    ("John")

Unknown placeholders are left untouched.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from requests.structures import CaseInsensitiveDict

SIGIL = ":"

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _ASCII_LETTERS | {"_"}
_IDENT_BODY = _IDENT_START | frozenset("0123456789")


class PlaceholderCase(str, Enum):
    """Case transformation applied to a replacement value."""

    LOWER = "lower"
    UPPER = "upper"
    PASCAL = "pascal"


def detect_case(name: str) -> PlaceholderCase:
    """Classify a placeholder name by the case of its letters."""
    letters = [char for char in name if char.isalpha()]
    has_upper = any(char.isupper() for char in letters)
    has_lower = any(char.islower() for char in letters)

    if has_upper and not has_lower:
        return PlaceholderCase.UPPER
    if has_upper and has_lower and name[0].isupper():
        return PlaceholderCase.PASCAL
    return PlaceholderCase.LOWER


def apply_case(value: str, case: PlaceholderCase) -> str:
    """Transform a replacement value to the requested case."""
    if not value:
        return value
    if case is PlaceholderCase.UPPER:
        return value.upper()
    if case is PlaceholderCase.PASCAL:
        return value[0].upper() + value[1:].lower()
    return value.lower()


def iter_tokens(text: str) -> Iterator[Tuple[int, int, str]]:
    """Yield ``(start, end, name)`` for each placeholder in ``text``.

    Tokens are found left to right without overlap; each one extends as far
    as identifier characters continue.
    """
    length = len(text)
    index = 0
    while index < length:
        if text[index] == SIGIL and index + 1 < length and text[index + 1] in _IDENT_START:
            end = index + 2
            while end < length and text[end] in _IDENT_BODY:
                end += 1
            yield index, end, text[index + 1 : end]
            index = end
        else:
            index += 1


def _normalize_replacements(replacements: Mapping[str, Any]) -> CaseInsensitiveDict:
    normalized = CaseInsensitiveDict()
    for key, value in replacements.items():
        name = str(key)
        if name.startswith(SIGIL):
            name = name[1:]
        if value is None or name in normalized:
            continue
        normalized[name] = value
    return normalized


def substitute(text: Optional[str], replacements: Optional[Mapping[str, Any]]) -> str:
    """Replace ``:placeholder`` tokens in ``text``.

    Args:
        text: Template text; None or empty yields "".
        replacements: Placeholder name (with or without the leading colon)
            to value. Names are matched case-insensitively; values are
            converted with str().

    Returns:
        Text with every known placeholder replaced.
    """
    if not text:
        return ""
    if not replacements:
        return text

    values = _normalize_replacements(replacements)
    parts = []
    cursor = 0
    for start, end, name in iter_tokens(text):
        if name not in values:
            continue
        parts.append(text[cursor:start])
        parts.append(apply_case(str(values[name]), detect_case(name)))
        cursor = end

    if not parts:
        return text
    parts.append(text[cursor:])
    return "".join(parts)
