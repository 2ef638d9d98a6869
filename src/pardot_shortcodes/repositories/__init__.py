"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the Pardot API)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from pardot_shortcodes.protocols import CacheStore, CatalogFetcher

from .pardot_api_client import PardotApiClient
from .redis_cache_store import RedisCacheStore

__all__ = [
    "CacheStore",
    "CatalogFetcher",
    "PardotApiClient",
    "RedisCacheStore",
]
