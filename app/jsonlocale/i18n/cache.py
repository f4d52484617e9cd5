"""Thread-safe memoization of merged translation catalogs."""

import threading
from typing import Any, Callable, Optional

from requests.structures import CaseInsensitiveDict

from jsonlocale.logging import get_module_logger

logger = get_module_logger()


class ResolutionCache:
    """In-memory cache of loaded values keyed case-insensitively.

    Entries never expire; they are removed only by invalidate(). Concurrent
    misses on the same key may each run the loader, but the first result
    stored wins and every caller receives that stored value.

    A load that started before an invalidation is handed back to its caller
    without being stored, so a slow reader cannot put a stale catalog back
    into the cache after it was cleared.
    """

    def __init__(self) -> None:
        self._entries: CaseInsensitiveDict = CaseInsensitiveDict()
        self._lock = threading.Lock()
        self._generation = 0

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, loading it on a miss.

        Args:
            key: Cache key, e.g. "merged_en".
            loader: Zero-argument callable producing the value.

        Returns:
            The stored value for the key.
        """
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            generation = self._generation

        value = loader()

        with self._lock:
            if generation != self._generation:
                logger.debug("translation_cache_store_skipped", key=key)
                return value
            if key in self._entries:
                return self._entries[key]
            self._entries[key] = value
            logger.debug("translation_cache_stored", key=key)
            return value

    def invalidate(self, key: Optional[str] = None) -> None:
        """Remove one entry, or every entry when ``key`` is None."""
        with self._lock:
            self._generation += 1
            if key is None:
                self._entries.clear()
                logger.debug("translation_cache_invalidated")
            else:
                self._entries.pop(key, None)
                logger.debug("translation_cache_entry_invalidated", key=key)

    def contains(self, key: str) -> bool:
        """Check whether ``key`` is currently cached."""
        with self._lock:
            return key in self._entries

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
