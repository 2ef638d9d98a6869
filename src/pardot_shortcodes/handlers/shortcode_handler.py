"""HTTP handlers for shortcode operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

import logging
import time
from collections.abc import Callable

from fastapi import HTTPException, status

from pardot_shortcodes.dto import (
    DynamicContentShortcodeRequest,
    FormShortcodeRequest,
    HealthCheckResponse,
    RefreshResponse,
    ShortcodeResponse,
)
from pardot_shortcodes.embed_attributes import RewriteOptions
from pardot_shortcodes.entities import EntityKind, ResolveOutcome
from pardot_shortcodes.exceptions import AuthenticationError, CatalogFetchError
from pardot_shortcodes.services import ShortcodeResolver

log = logging.getLogger(__name__)


class ShortcodeHandler:
    """HTTP handlers for shortcode rendering and catalog maintenance.

    Example:
        ```python
        handler = ShortcodeHandler(resolver=resolver, health_check=store.health_check)

        @app.post("/shortcodes/form", response_model=ShortcodeResponse)
        async def render_form(request: FormShortcodeRequest):
            return await handler.render_form(request)
        ```
    """

    def __init__(
        self,
        resolver: ShortcodeResolver,
        health_check: Callable[[], bool] | None = None,
    ) -> None:
        """Initialize the shortcode handler.

        Args:
            resolver: The shortcode resolver (required).
            health_check: Probe for the cache backend. Reports healthy if omitted.
        """
        self._resolver = resolver
        self._health_check = health_check or (lambda: True)

    async def render_form(self, request: FormShortcodeRequest) -> ShortcodeResponse:
        """Handle POST /shortcodes/form requests."""
        return await self._render(EntityKind.FORM, request.title, request.to_options())

    async def render_dynamic_content(
        self, request: DynamicContentShortcodeRequest
    ) -> ShortcodeResponse:
        """Handle POST /shortcodes/dynamic-content requests."""
        return await self._render(EntityKind.DYNAMIC_CONTENT, request.name, request.to_options())

    async def _render(
        self,
        kind: EntityKind,
        identifier: str | None,
        options: RewriteOptions,
    ) -> ShortcodeResponse:
        """Resolve a shortcode and wrap the result.

        Unexpected errors are logged and rendered as empty markup, the same
        way ``ShortcodeResolver.resolve`` degrades.
        """
        start_time = time.time()
        try:
            result = await self._resolver.resolve_result(kind, identifier, options)
        except Exception:
            log.exception("Unexpected error rendering %s %r", kind.value, identifier)
            return ShortcodeResponse(
                markup="",
                outcome=ResolveOutcome.FETCH_FAILED.value,
                found=False,
                refreshed=False,
                lookup_time_ms=(time.time() - start_time) * 1000,
            )

        return ShortcodeResponse(
            markup=result.markup,
            outcome=result.outcome.value,
            found=result.found,
            refreshed=result.refreshed,
            lookup_time_ms=(time.time() - start_time) * 1000,
        )

    async def refresh_catalogs(self) -> RefreshResponse:
        """Handle POST /catalog/refresh requests.

        Raises:
            HTTPException: 502 if Pardot cannot be reached or rejects the credentials
        """
        try:
            counts = await self._resolver.cache.refresh_all()
        except AuthenticationError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Pardot rejected the configured credentials: {e}",
            ) from e
        except CatalogFetchError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to refresh catalogs: {e}",
            ) from e

        return RefreshResponse(
            success=True,
            forms=counts[EntityKind.FORM],
            dynamic_content=counts[EntityKind.DYNAMIC_CONTENT],
            message="Catalogs refreshed successfully",
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._health_check()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )
