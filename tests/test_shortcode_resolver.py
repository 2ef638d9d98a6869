"""
Tests for the shortcode resolver.
"""

import httpx
import pytest
from conftest import CONTACT_FORM, NEWSLETTER_FORM

from pardot_shortcodes.embed_attributes import RewriteOptions
from pardot_shortcodes.entities import CatalogEntity, EntityKind, ResolveOutcome
from pardot_shortcodes.exceptions import AuthenticationError, RemoteUnavailableError
from pardot_shortcodes.repositories import PardotApiClient
from pardot_shortcodes.services import CatalogCache, ShortcodeResolver


@pytest.mark.parametrize("identifier", [None, ""])
async def test_missing_identifier_skips_lookup(resolver, store, fetcher, identifier):
    result = await resolver.resolve_result(EntityKind.FORM, identifier)

    assert result.outcome is ResolveOutcome.NO_IDENTIFIER
    assert result.markup == ""
    assert store.loads == []
    assert fetcher.calls == []


async def test_cache_miss_fetches_once_then_hits(resolver, store, fetcher):
    first = await resolver.resolve_result(EntityKind.FORM, "contactus")
    second = await resolver.resolve_result(EntityKind.FORM, "Newsletter Signup")

    assert first.found and first.refreshed
    assert first.markup == CONTACT_FORM.embed_code
    assert second.found and not second.refreshed
    assert second.markup == NEWSLETTER_FORM.embed_code
    assert fetcher.calls == [EntityKind.FORM]
    assert store.saves == ["serialized_forms"]


async def test_cache_hit_does_not_fetch(resolver, catalog_cache, fetcher):
    catalog_cache.put(EntityKind.FORM, [CONTACT_FORM])

    markup = await resolver.resolve(EntityKind.FORM, "Contact Us")

    assert markup == CONTACT_FORM.embed_code
    assert fetcher.calls == []


async def test_stale_cache_refreshes_on_unknown_identifier(resolver, catalog_cache, fetcher):
    """A form created after the catalog was cached is picked up by refreshing."""
    catalog_cache.put(EntityKind.FORM, [CONTACT_FORM])

    result = await resolver.resolve_result(EntityKind.FORM, "newsletter signup")

    assert result.found and result.refreshed
    assert fetcher.calls == [EntityKind.FORM]
    assert catalog_cache.get(EntityKind.FORM) == [CONTACT_FORM, NEWSLETTER_FORM]


async def test_not_found_after_single_refresh(resolver, fetcher):
    result = await resolver.resolve_result(EntityKind.FORM, "Does Not Exist")

    assert result.outcome is ResolveOutcome.NOT_FOUND
    assert result.markup == ""
    assert fetcher.calls == [EntityKind.FORM]


async def test_cached_miss_then_absent_after_refresh_fetches_once(resolver, catalog_cache, fetcher):
    catalog_cache.put(EntityKind.FORM, [CONTACT_FORM])

    assert await resolver.resolve(EntityKind.FORM, "Does Not Exist") == ""
    assert fetcher.calls == [EntityKind.FORM]


@pytest.mark.parametrize("error", [RemoteUnavailableError("down"), AuthenticationError("bad key")])
async def test_fetch_failure_degrades_to_empty(resolver, fetcher, error):
    fetcher.error = error

    result = await resolver.resolve_result(EntityKind.FORM, "Contact Us")

    assert result.outcome is ResolveOutcome.FETCH_FAILED
    assert await resolver.resolve(EntityKind.FORM, "Contact Us") == ""


async def test_unexpected_error_never_escapes_resolve(resolver, fetcher):
    fetcher.error = RuntimeError("boom")

    assert await resolver.resolve(EntityKind.FORM, "Contact Us") == ""


async def test_corrupt_cache_treated_as_miss(resolver, store, fetcher):
    store.data["serialized_forms"] = b"{corrupt"

    markup = await resolver.resolve(EntityKind.FORM, "Contact Us")

    assert markup == CONTACT_FORM.embed_code
    assert fetcher.calls == [EntityKind.FORM]


async def test_unavailable_store_still_resolves(resolver, store, fetcher):
    store.fail_load = True
    store.fail_save = True

    markup = await resolver.resolve(EntityKind.FORM, "Contact Us")

    assert markup == CONTACT_FORM.embed_code
    assert fetcher.calls == [EntityKind.FORM]


async def test_duplicate_names_first_in_fetch_order_wins(resolver, fetcher):
    fetcher.catalogs[EntityKind.FORM] = [
        CatalogEntity(name="Contact Us", embed_code="<iframe>first</iframe>"),
        CatalogEntity(name="contact us", embed_code="<iframe>second</iframe>"),
    ]

    assert await resolver.resolve(EntityKind.FORM, "CONTACTUS") == "<iframe>first</iframe>"


async def test_end_to_end_form_with_forced_https(resolver, site_config):
    site_config.force_https = True

    markup = await resolver.resolve(
        EntityKind.FORM,
        "contactus",
        RewriteOptions(height="500", classes="blue"),
    )

    assert "https://go.pardot.com/f/1" in markup
    assert 'height="500"' in markup
    assert 'class="pardotform blue"' in markup


async def test_https_policy_read_on_every_call(resolver, site_config):
    assert "http://go.pardot.com/f/1" in await resolver.resolve(EntityKind.FORM, "Contact Us")

    site_config.force_https = True

    assert "https://go.pardot.com/f/1" in await resolver.resolve(EntityKind.FORM, "Contact Us")


async def test_render_form_reads_title_argument(resolver):
    markup = await resolver.render_form({"title": "Newsletter Signup", "width": "600"})

    assert 'width="600"' in markup


async def test_render_form_ignores_name_argument(resolver, fetcher):
    assert await resolver.render_form({"name": "Contact Us"}) == ""
    assert fetcher.calls == []


async def test_render_dynamic_content_reads_name_argument(resolver):
    markup = await resolver.render_dynamic_content(
        {"name": "homepage promo", "width": "50%", "classes": "hero"}
    )

    assert "width:50%" in markup
    assert 'class="pardotdc hero"' in markup


async def test_kinds_use_separate_slots(resolver, store, fetcher):
    await resolver.render_form({"title": "Contact Us"})
    await resolver.render_dynamic_content({"name": "Homepage Promo"})

    assert fetcher.calls == [EntityKind.FORM, EntityKind.DYNAMIC_CONTENT]
    assert sorted(store.data) == ["serialized_dynamic_content", "serialized_forms"]


@pytest.mark.parametrize(
    "page",
    [
        {"@attributes": {"stat": "ok"}, "result": ["unexpected"]},
        {"@attributes": {"stat": "ok"}, "result": {"total_results": "n/a"}},
    ],
)
async def test_malformed_pardot_response_degrades_to_fetch_failed(store, site_config, page):
    def pardot(request):
        if request.url.path.startswith("/api/login/"):
            return httpx.Response(200, json={"@attributes": {"stat": "ok"}, "api_key": "abc123"})
        return httpx.Response(200, json=page)

    fetcher = PardotApiClient(
        email="marketing@example.com",
        password="secret",
        user_key="user-key",
        transport=httpx.MockTransport(pardot),
    )
    resolver = ShortcodeResolver(cache=CatalogCache(store=store, fetcher=fetcher), site_config=site_config)

    result = await resolver.resolve_result(EntityKind.FORM, "Contact Us")

    assert result.outcome is ResolveOutcome.FETCH_FAILED
    assert result.markup == ""
    await fetcher.close()
