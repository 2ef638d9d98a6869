"""Catalog cache service.

Keeps one serialized catalog per entity kind in a CacheStore and
repopulates it wholesale from a CatalogFetcher. Lookups and refreshes are
separate calls so the caller decides when a miss warrants a fetch.
"""

import json
import logging

from pardot_shortcodes.entities import CatalogEntity, EntityKind
from pardot_shortcodes.exceptions import CacheStoreError, CatalogDeserializationError
from pardot_shortcodes.protocols import CacheStore, CatalogFetcher

log = logging.getLogger(__name__)


def serialize_catalog(entities: list[CatalogEntity]) -> bytes:
    return json.dumps([entity.to_dict() for entity in entities]).encode("utf-8")


def deserialize_catalog(payload: bytes) -> list[CatalogEntity]:
    """Decode a stored catalog payload.

    Raises:
        CatalogDeserializationError: If the payload is not a JSON list of
            ``{"name", "embedCode"}`` objects
    """
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogDeserializationError(f"Cached catalog is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CatalogDeserializationError("Cached catalog is not a list")

    try:
        return [CatalogEntity.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        raise CatalogDeserializationError(f"Cached catalog entry is malformed: {e!r}") from e


class CatalogCache:
    """Two-slot (forms, dynamic content) catalog cache.

    Example:
        ```python
        cache = CatalogCache(store=RedisCacheStore.create(), fetcher=PardotApiClient.create())

        forms = cache.get(EntityKind.FORM)
        if forms is None:
            forms = await cache.fetch_and_replace(EntityKind.FORM)
        ```
    """

    def __init__(self, store: CacheStore, fetcher: CatalogFetcher) -> None:
        """Initialize the catalog cache.

        Args:
            store: Backing key/value store (required).
            fetcher: Remote catalog source used on refresh (required).
        """
        self._store = store
        self._fetcher = fetcher

    def get(self, kind: EntityKind) -> list[CatalogEntity] | None:
        """Read the cached catalog for a kind.

        Args:
            kind: Which slot to read

        Returns:
            The cached entities in stored order, or None if the slot is absent

        Raises:
            CatalogDeserializationError: If the stored payload is corrupt
            CacheStoreError: If the store cannot be read
        """
        payload = self._store.load(kind.cache_key)
        if payload is None:
            return None
        return deserialize_catalog(payload)

    def put(self, kind: EntityKind, entities: list[CatalogEntity]) -> None:
        """Replace the cached catalog for a kind.

        Raises:
            CacheStoreError: If the store cannot be written
        """
        self._store.save(kind.cache_key, serialize_catalog(entities))

    async def fetch_and_replace(self, kind: EntityKind) -> list[CatalogEntity]:
        """Fetch the full catalog from the remote API and store it.

        A failed save is logged and the fetched catalog is still returned,
        so the current request can use it.

        Args:
            kind: Which catalog to refresh

        Returns:
            The freshly fetched entities

        Raises:
            RemoteUnavailableError: If the fetch fails
            AuthenticationError: If the credentials are rejected
        """
        entities = await self._fetcher.fetch(kind)
        try:
            self.put(kind, entities)
        except CacheStoreError as e:
            log.warning("Could not cache %s catalog: %s", kind.value, e)
        return entities

    async def refresh_all(self) -> dict[EntityKind, int]:
        """Refresh every catalog.

        Returns:
            Number of entities fetched per kind

        Raises:
            CatalogFetchError: If any fetch fails
        """
        counts = {}
        for kind in EntityKind:
            counts[kind] = len(await self.fetch_and_replace(kind))
        return counts

    @property
    def store(self) -> CacheStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def fetcher(self) -> CatalogFetcher:
        """Get the underlying fetcher (for testing)."""
        return self._fetcher
