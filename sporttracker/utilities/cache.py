"""In-memory TTL cache.

One cache instance is shared by every query kind, so keys are namespaced
with make_cache_key() (teams:soccer, events:133604, players:133604).

Expiry is lazy: an entry past its deadline is treated as missing on the
next read and dropped. cleanup_expired() exists for a background sweeper
but correctness never depends on it running.
"""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


def make_cache_key(*parts: str) -> str:
    """Build a namespaced cache key.

    >>> make_cache_key("teams", "soccer")
    'teams:soccer'
    """
    return ":".join(str(p) for p in parts)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the clock reading after which it is stale."""

    value: Any
    expires_at: float


class TTLCache:
    """Thread-safe key/value store with per-entry expiration.

    No size bound: entries leave only through expiry, invalidate() or clear().

    A single lock guards the store. Readers see either the entry before or
    after a concurrent set(), never a partial one. The lock is only ever held
    for dict operations, so callers can safely do slow work between get()
    and set().

    Args:
        clock: Monotonic time source in seconds. Injectable for tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str, expected_type: type | tuple[type, ...] | None = None) -> Any | None:
        """Get a live value.

        Args:
            key: Cache key
            expected_type: If given, a stored value of another type counts as a miss

        Returns:
            The cached value, or None if missing, expired or of the wrong type
        """
        with self._lock:
            entry = self._live_entry(key)
            if entry is None or (
                expected_type is not None and not isinstance(entry.value, expected_type)
            ):
                self._misses += 1
                return None
            self._hits += 1
            return entry.value

    def get_list(self, key: str, item_type: type) -> list | None:
        """Get a live list whose items are all item_type.

        A list holding anything else is treated as a miss, so a stray
        value under the wrong namespace can never leak to a caller.
        """
        with self._lock:
            entry = self._live_entry(key)
            value = entry.value if entry is not None else None
            valid = isinstance(value, list) and all(isinstance(item, item_type) for item in value)
            if valid:
                self._hits += 1
            else:
                self._misses += 1

        if valid:
            return value
        if entry is not None:
            logger.warning("[CACHE] Type mismatch for %s, expected list[%s]", key, item_type.__name__)
        return None

    def _live_entry(self, key: str) -> CacheEntry | None:
        """Entry for key, dropping it if expired. Caller holds the lock."""
        entry = self._store.get(key)
        if entry is not None and self._clock() >= entry.expires_at:
            del self._store[key]
            return None
        return entry

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store a value, replacing any existing entry for key."""
        entry = CacheEntry(value=value, expires_at=self._clock() + ttl_seconds)
        with self._lock:
            self._store[key] = entry

    def invalidate(self, key: str) -> bool:
        """Remove a key. Returns True if it was present."""
        with self._lock:
            return self._store.pop(key, None) is not None

    def clear(self) -> int:
        """Remove everything. Returns the number of entries dropped."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
            return count

    def cleanup_expired(self) -> int:
        """Physically remove expired entries. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._store.items() if now >= entry.expires_at]
            for key in expired:
                del self._store[key]
            return len(expired)

    def stats(self) -> dict:
        """Counters for the cache status endpoint."""
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total, 3) if total else 0.0,
            }

    def __len__(self) -> int:
        """Number of stored entries, including ones not yet swept."""
        with self._lock:
            return len(self._store)

    def __contains__(self, key: str) -> bool:
        """Membership test. Does not touch the hit/miss counters."""
        with self._lock:
            return self._live_entry(key) is not None
