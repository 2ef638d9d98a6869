"""Redis implementation of CacheStore.

Stores each serialized catalog as a plain string key with an expiry.
It's the default implementation and satisfies the CacheStore protocol.
"""

import logging

import redis

from pardot_shortcodes.config import get_redis_client, settings
from pardot_shortcodes.exceptions import CacheStoreError

log = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis implementation of the catalog cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Keys are namespaced as ``<prefix>:<key>`` and every save resets the
    entry's TTL, so Redis decides when a catalog goes stale.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Key namespace. Defaults to settings.
            ttl: Time-to-live for entries in seconds. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix or settings.cache_prefix
        self._ttl = ttl or settings.cache_ttl

    @classmethod
    def create(
        cls,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            prefix: Key namespace. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheStore
        """
        return cls(prefix=prefix, ttl=ttl)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def load(self, key: str) -> bytes | None:
        """Load a stored catalog payload.

        Args:
            key: The un-prefixed cache key

        Returns:
            The stored bytes, or None if absent or expired

        Raises:
            CacheStoreError: If Redis cannot be reached
        """
        try:
            value = self._client.get(self._key(key))
        except redis.RedisError as e:
            raise CacheStoreError(f"Failed to load {key!r} from Redis: {e}") from e

        if value is None:
            return None
        if isinstance(value, str):
            return value.encode()
        return value  # type: ignore[return-value]

    def save(self, key: str, value: bytes) -> None:
        """Store a catalog payload, replacing any previous value.

        Args:
            key: The un-prefixed cache key
            value: The serialized payload

        Raises:
            CacheStoreError: If Redis cannot be reached
        """
        try:
            self._client.set(self._key(key), value, ex=self._ttl)
        except redis.RedisError as e:
            raise CacheStoreError(f"Failed to save {key!r} to Redis: {e}") from e
        log.debug("Saved %s (%d bytes, ttl=%ss)", self._key(key), len(value), self._ttl)

    def clear(self) -> int:
        """Delete every key in this store's namespace.

        Returns:
            Number of keys deleted

        Raises:
            CacheStoreError: If Redis cannot be reached
        """
        count = 0
        try:
            for key in self._client.scan_iter(match=f"{self._prefix}:*"):
                if self._client.delete(key):
                    count += 1
        except redis.RedisError as e:
            raise CacheStoreError(f"Failed to clear {self._prefix!r} keys from Redis: {e}") from e
        return count

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
