"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> memcached, live API -> fixture)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from pardot_shortcodes.protocols import CacheStore, CatalogFetcher

    store: CacheStore = RedisCacheStore.create()
    fetcher: CatalogFetcher = PardotApiClient.create()
    ```
"""

from .cache_store import CacheStore
from .catalog_fetcher import CatalogFetcher
from .site_config import SiteConfig

__all__ = [
    "CacheStore",
    "CatalogFetcher",
    "SiteConfig",
]
