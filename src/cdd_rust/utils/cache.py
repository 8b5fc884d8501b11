"""In-memory caching for parsed syntax trees."""

from __future__ import annotations

import hashlib
from typing import Generic, TypeVar

_T = TypeVar("_T")


class MemoryCache(Generic[_T]):
    """Bounded LRU cache.

    Uses a plain ``dict`` (insertion-ordered) for LRU eviction via
    delete-and-reinsert.

    Args:
        max_size: Maximum number of entries before the oldest is evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._max_size = max_size
        self._store: dict[str, _T] = {}

    def get(self, key: str) -> _T | None:
        """Return the cached value or ``None`` if missing."""
        if key not in self._store:
            return None
        value = self._store.pop(key)
        self._store[key] = value
        return value

    def put(self, key: str, value: _T) -> None:
        """Store a value, evicting the least recently used entry if full."""
        if key in self._store:
            del self._store[key]
        elif len(self._store) >= self._max_size:
            oldest = next(iter(self._store))
            del self._store[oldest]
        self._store[key] = value

    def clear(self) -> None:
        """Remove all entries."""
        self._store.clear()

    @property
    def size(self) -> int:
        """Number of entries currently held."""
        return len(self._store)


def content_hash(data: bytes) -> str:
    """Compute a stable 16-char hex hash for *data*."""
    return hashlib.sha256(data).hexdigest()[:16]
