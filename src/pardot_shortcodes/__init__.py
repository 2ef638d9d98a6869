"""Pardot Shortcodes - resolve CMS shortcodes to Pardot embed markup.

This package provides a layered architecture for shortcode resolution:

Layers:
    - protocols: Interface contracts (CacheStore, CatalogFetcher, SiteConfig)
    - repositories: Data access implementations (Redis, Pardot API)
    - services: Business logic (CatalogCache, ShortcodeResolver)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from pardot_shortcodes import (
        CatalogCache, PardotApiClient, RedisCacheStore, ShortcodeResolver, settings,
    )

    cache = CatalogCache(store=RedisCacheStore.create(), fetcher=PardotApiClient.create())
    resolver = ShortcodeResolver(cache=cache, site_config=settings)
    markup = await resolver.render_form({"title": "Contact Us", "classes": "wide"})
    ```

For HTTP API:
    ```python
    from pardot_shortcodes.api.app import app
    ```
"""

from pardot_shortcodes.config import get_redis_client, settings
from pardot_shortcodes.embed_attributes import RewriteOptions
from pardot_shortcodes.entities import CatalogEntity, EntityKind, ResolveOutcome, ResolveResult
from pardot_shortcodes.exceptions import (
    AuthenticationError,
    CacheStoreError,
    CatalogDeserializationError,
    CatalogFetchError,
    RemoteUnavailableError,
    ShortcodeError,
)
from pardot_shortcodes.handlers import ShortcodeHandler
from pardot_shortcodes.protocols import CacheStore, CatalogFetcher, SiteConfig
from pardot_shortcodes.repositories import PardotApiClient, RedisCacheStore
from pardot_shortcodes.services import CatalogCache, ShortcodeResolver

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "CatalogFetcher",
    "SiteConfig",
    # Services (business logic)
    "CatalogCache",
    "ShortcodeResolver",
    "RewriteOptions",
    # Handlers (HTTP)
    "ShortcodeHandler",
    # Repositories (data access)
    "RedisCacheStore",
    "PardotApiClient",
    # Entities (domain models)
    "CatalogEntity",
    "EntityKind",
    "ResolveOutcome",
    "ResolveResult",
    # Errors
    "ShortcodeError",
    "CatalogFetchError",
    "RemoteUnavailableError",
    "AuthenticationError",
    "CatalogDeserializationError",
    "CacheStoreError",
]
