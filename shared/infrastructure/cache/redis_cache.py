"""
Redis cache implementation.
"""
import json
from typing import Any, Optional

from django.core.cache import cache


class RedisCache:
    """Cache wrapper with key prefixing and JSON serialization."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def _make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        """Get a value from cache."""
        value = cache.get(self._make_key(key))
        if value is not None and isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value

    def set(self, key: str, value: Any, timeout: int = 300) -> None:
        """Set a value in cache."""
        if isinstance(value, (dict, list)):
            value = json.dumps(value)
        cache.set(self._make_key(key), value, timeout)

    def add(self, key: str, value: Any, timeout: int = 300) -> bool:
        """Set a value only if the key is absent. Returns True when stored."""
        return cache.add(self._make_key(key), value, timeout)

    def delete(self, key: str) -> None:
        """Delete a value from cache."""
        cache.delete(self._make_key(key))


class CacheLock:
    """
    Non-blocking mutual exclusion backed by the cache.

    The lock expires after ``timeout`` seconds so a request that dies while
    holding it cannot block the owner forever.
    """

    def __init__(self, cache_store: RedisCache, key: str, timeout: int = 30):
        self.cache_store = cache_store
        self.key = key
        self.timeout = timeout
        self._held = False

    def acquire(self) -> bool:
        self._held = self.cache_store.add(self.key, "1", self.timeout)
        return self._held

    def release(self) -> None:
        if self._held:
            self.cache_store.delete(self.key)
            self._held = False

    @property
    def held(self) -> bool:
        return self._held
