"""Shortcode resolver service.

Turns a shortcode (kind + identifier + display options) into embed
markup by coordinating the catalog cache, the name matcher and the
embed rewriter.
"""

import logging
from collections.abc import Mapping

from pardot_shortcodes import embed_attributes
from pardot_shortcodes.embed_attributes import RewriteOptions
from pardot_shortcodes.entities import CatalogEntity, EntityKind, ResolveOutcome, ResolveResult
from pardot_shortcodes.exceptions import CacheStoreError, CatalogDeserializationError, CatalogFetchError
from pardot_shortcodes.matching import find_embed_code
from pardot_shortcodes.protocols import SiteConfig

from .catalog_cache import CatalogCache

log = logging.getLogger(__name__)


class ShortcodeResolver:
    """Core shortcode resolution service.

    Lookup strategy per call:
    1. Empty identifier: nothing to resolve
    2. Read the cached catalog and look for a match
    3. On any miss (slot absent, corrupt, or identifier not listed),
       refresh the catalog from Pardot exactly once and look again
    4. Rewrite the matched embed code for this use

    A missing entity or a failed refresh never raises out of ``resolve``;
    it renders as an empty string so the surrounding page still renders.

    Example:
        ```python
        resolver = ShortcodeResolver(cache=catalog_cache, site_config=settings)

        markup = await resolver.render_form({"title": "Contact Us", "height": "500"})
        ```
    """

    def __init__(self, cache: CatalogCache, site_config: SiteConfig) -> None:
        """Initialize the resolver.

        Args:
            cache: Catalog cache (required).
            site_config: Source of the HTTPS policy, read on every call (required).
        """
        self._cache = cache
        self._site_config = site_config

    async def resolve_result(
        self,
        kind: EntityKind,
        identifier: str | None,
        options: RewriteOptions | None = None,
    ) -> ResolveResult:
        """Resolve a shortcode and report how it went.

        Args:
            kind: Form or dynamic content
            identifier: Requested title or name
            options: Display overrides, if any

        Returns:
            ResolveResult with outcome, markup and whether a refresh happened
        """
        if not identifier:
            return ResolveResult(ResolveOutcome.NO_IDENTIFIER)

        options = options or RewriteOptions()

        catalog = self._cached_catalog(kind)
        if catalog is not None:
            embed_code = find_embed_code(catalog, identifier)
            if embed_code is not None:
                return ResolveResult(ResolveOutcome.FOUND, self._rewrite(embed_code, options, kind))
            log.info("%r not in cached %s catalog, refreshing", identifier, kind.value)
        else:
            log.info("No cached %s catalog, fetching", kind.value)

        try:
            catalog = await self._cache.fetch_and_replace(kind)
        except CatalogFetchError as e:
            log.warning("Failed to refresh %s catalog for %r: %s", kind.value, identifier, e)
            return ResolveResult(ResolveOutcome.FETCH_FAILED, refreshed=True)

        embed_code = find_embed_code(catalog, identifier)
        if embed_code is None:
            log.warning("No Pardot %s named %r", kind.value, identifier)
            return ResolveResult(ResolveOutcome.NOT_FOUND, refreshed=True)

        return ResolveResult(
            ResolveOutcome.FOUND,
            self._rewrite(embed_code, options, kind),
            refreshed=True,
        )

    async def resolve(
        self,
        kind: EntityKind,
        identifier: str | None,
        options: RewriteOptions | None = None,
    ) -> str:
        """Resolve a shortcode to markup, or an empty string if it cannot be."""
        try:
            result = await self.resolve_result(kind, identifier, options)
        except Exception:
            # nothing escapes resolve
            log.exception("Unexpected error resolving %s %r", kind, identifier)
            return ""
        return result.markup

    async def render_form(self, arguments: Mapping[str, str | None]) -> str:
        """Shortcode callback for ``[pardot_form title="..."]``."""
        return await self._render(EntityKind.FORM, arguments)

    async def render_dynamic_content(self, arguments: Mapping[str, str | None]) -> str:
        """Shortcode callback for ``[pardot_dynamic_content name="..."]``."""
        return await self._render(EntityKind.DYNAMIC_CONTENT, arguments)

    async def _render(self, kind: EntityKind, arguments: Mapping[str, str | None]) -> str:
        return await self.resolve(
            kind,
            arguments.get(kind.identifier_argument),
            RewriteOptions.from_arguments(arguments),
        )

    def _cached_catalog(self, kind: EntityKind) -> list[CatalogEntity] | None:
        """Read the cached catalog, treating unreadable slots as absent."""
        try:
            return self._cache.get(kind)
        except CatalogDeserializationError as e:
            log.warning("Discarding corrupt %s catalog: %s", kind.value, e)
        except CacheStoreError as e:
            log.warning("Catalog cache unavailable for %s: %s", kind.value, e)
        return None

    def _rewrite(self, embed_code: str, options: RewriteOptions, kind: EntityKind) -> str:
        return embed_attributes.apply(
            embed_code,
            options,
            kind,
            force_https=self._site_config.force_https,
            secure_host=self._site_config.secure_host,
        )

    @property
    def cache(self) -> CatalogCache:
        """Get the underlying catalog cache (for testing)."""
        return self._cache
