"""Dot-notation key lookup over translation trees."""

from collections.abc import Mapping
from typing import Any, List

from requests.structures import CaseInsensitiveDict


class _Missing:
    """Marker for a key that is not present in a tree."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def parse_key(key: str) -> List[str]:
    """Split a dot-notation key into its non-empty segments.

    "a..b" and ".a.b." both yield ["a", "b"]; "" and "." yield [].
    """
    if not key:
        return []
    return [segment for segment in key.split(".") if segment]


def _child(mapping: Mapping, segment: str) -> Any:
    if isinstance(mapping, CaseInsensitiveDict):
        return mapping.get(segment, MISSING)
    if segment in mapping:
        return mapping[segment]
    folded = segment.casefold()
    for name, value in mapping.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return MISSING


def resolve_key(tree: Any, key: str) -> Any:
    """Walk a tree along a dot-notation key.

    Segments are matched case-insensitively. The terminal value is returned
    as-is; a JSON null leaf comes back as None.

    Args:
        tree: Translation tree (or any mapping).
        key: Dot-notation key, e.g. "site.title".

    Returns:
        The value at the key, or MISSING when any segment is absent, an
        intermediate value is not a mapping, or the key has no segments.
    """
    segments = parse_key(key)
    if not segments or tree is None:
        return MISSING

    current = tree
    for segment in segments:
        if not isinstance(current, Mapping):
            return MISSING
        current = _child(current, segment)
        if current is MISSING:
            return MISSING
    return current
