"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from pardot_shortcodes.config import configure_logging, settings
from pardot_shortcodes.handlers import ShortcodeHandler
from pardot_shortcodes.repositories import PardotApiClient, RedisCacheStore
from pardot_shortcodes.services import CatalogCache, ShortcodeResolver

log = logging.getLogger(__name__)


def get_handler(request: Request) -> ShortcodeHandler:
    """Dependency injection for ShortcodeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "shortcode_handler", None)
    if handler is None:
        raise RuntimeError("ShortcodeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache store and Pardot client (data access)
    2. Catalog cache and resolver (business logic)
    3. Handler (HTTP endpoints)

    Cleanup:
        Closes the Pardot HTTP client and removes services from app.state
    """
    configure_logging()

    store = RedisCacheStore.create()
    fetcher = PardotApiClient.create()
    cache = CatalogCache(store=store, fetcher=fetcher)
    resolver = ShortcodeResolver(cache=cache, site_config=settings)

    app.state.store = store
    app.state.fetcher = fetcher
    app.state.resolver = resolver
    app.state.shortcode_handler = ShortcodeHandler(
        resolver=resolver,
        health_check=store.health_check,
    )

    if not settings.has_credentials:
        log.warning("Pardot credentials are not configured, every lookup will render empty")
    log.info("Shortcode service initialized (redis=%s, force_https=%s)", settings.redis_url, settings.force_https)

    yield

    await fetcher.close()
    del app.state.shortcode_handler
    del app.state.resolver
    del app.state.fetcher
    del app.state.store
    log.info("Shortcode service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ShortcodeHandler, Depends(get_handler)]
