"""Deep merge of translation trees with override precedence."""

from collections.abc import Mapping
from typing import Iterable, Optional

from requests.structures import CaseInsensitiveDict

from jsonlocale.i18n.models import TranslationTree


def deep_merge(
    base: Optional[Mapping],
    override: Optional[Mapping],
) -> TranslationTree:
    """Merge ``override`` on top of ``base`` and return a new tree.

    When both sides hold a mapping for the same key, the mappings are merged
    recursively. Any other collision (leaf vs leaf, list vs list, mapping vs
    leaf in either direction) is resolved by taking the override value whole.
    Neither input is modified.

    Args:
        base: Lower-priority tree, or None.
        override: Higher-priority tree, or None.

    Returns:
        A new case-insensitive tree.
    """
    if base is None and override is None:
        return CaseInsensitiveDict()
    if base is None:
        return CaseInsensitiveDict(override)
    if override is None:
        return CaseInsensitiveDict(base)

    result = CaseInsensitiveDict(base)
    for key, value in override.items():
        existing = result.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(existing, value)
        else:
            result[key] = value
    return result


def merge_all(trees: Iterable[Optional[Mapping]]) -> TranslationTree:
    """Fold trees left to right, lowest priority first."""
    result = CaseInsensitiveDict()
    for tree in trees:
        result = deep_merge(result, tree)
    return result
