"""
Cache service for translation results.

A bounded FIFO cache with lazy TTL expiry. Keys are built from the extracted
message, the request options and the registry versions, so any registry
mutation makes earlier entries unreachable.
"""

import json
import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Generic, Optional, Sequence, TypeVar

from web3_error_helper.models.result import TranslateErrorOptions

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CacheEntry(Generic[T]):
    """Cache entry with value and expiration time."""

    def __init__(self, value: T, expires_at: float):
        self.value = value
        self.expires_at = expires_at

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TranslationCache(Generic[T]):
    """First-in first-out cache with a time to live per entry."""

    def __init__(
        self,
        max_size: int = 1000,
        ttl: float = 300,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries; the oldest is evicted first
            ttl: Time to live in seconds
            clock: Monotonic time source
        """
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self.cache: "OrderedDict[str, CacheEntry[T]]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self.expirations = 0

    @staticmethod
    def make_key(
        message: str,
        options: TranslateErrorOptions,
        context: Sequence[Any] = ()
    ) -> str:
        """Build a cache key from the message, options and extra context."""
        return json.dumps(
            [message, options.model_dump(mode="json"), list(context)],
            sort_keys=True,
            default=str,
        )

    def get(self, key: str) -> Optional[T]:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if missing or expired
        """
        entry = self.cache.get(key)
        if entry is None:
            self.misses += 1
            return None

        if entry.is_expired(self._clock()):
            del self.cache[key]
            self.expirations += 1
            self.misses += 1
            return None

        self.hits += 1
        return entry.value

    def set(self, key: str, value: T) -> None:
        """
        Set a value in the cache.

        Args:
            key: Cache key
            value: Value to cache
        """
        self.cache.pop(key, None)
        while len(self.cache) >= self.max_size:
            self.cache.popitem(last=False)
            self.evictions += 1
        self.cache[key] = CacheEntry(value, self._clock() + self.ttl)

    def clear(self) -> None:
        """Clear the cache."""
        self.cache.clear()

    def size(self) -> int:
        return len(self.cache)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        total = self.hits + self.misses
        return {
            "size": len(self.cache),
            "max_size": self.max_size,
            "ttl": self.ttl,
            "hits": self.hits,
            "misses": self.misses,
            "hit_ratio": self.hits / total if total else 0,
            "evictions": self.evictions,
            "expirations": self.expirations,
        }
