"""Cache storage protocol.

Defines the interface for the key/value store that persists serialized
catalogs between requests. The store owns retention: entries may expire
or be evicted at any time, and callers only ever see "present" or "absent".

Implementations can include:
- Redis (default)
- An in-process dict (tests)
- Any other byte-oriented key/value cache
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for catalog cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from pardot_shortcodes.protocols import CacheStore

        store: CacheStore = RedisCacheStore.create()
        store.save("serialized_forms", b"[]")
        store.load("serialized_forms")  # b"[]"
        ```
    """

    def load(self, key: str) -> bytes | None:
        """Load a stored value.

        Args:
            key: The cache key to read

        Returns:
            The stored bytes, or None if the key is absent

        Raises:
            CacheStoreError: If the backend cannot be read
        """
        ...

    def save(self, key: str, value: bytes) -> None:
        """Store a value, overwriting any previous value.

        Args:
            key: The cache key to write
            value: The serialized payload

        Raises:
            CacheStoreError: If the backend cannot be written
        """
        ...
