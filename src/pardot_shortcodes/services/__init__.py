"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> ShortcodeResolver -> CatalogCache -> CacheStore / CatalogFetcher
    (HTTP)  -> (Business)        -> (Caching)    -> (Data Access)

Usage:
    ```python
    from pardot_shortcodes.services import CatalogCache, ShortcodeResolver

    cache = CatalogCache(store=store, fetcher=fetcher)
    resolver = ShortcodeResolver(cache=cache, site_config=settings)
    ```
"""

from .catalog_cache import CatalogCache
from .shortcode_resolver import ShortcodeResolver

__all__ = [
    "CatalogCache",
    "ShortcodeResolver",
]
