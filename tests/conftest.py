"""
Shared fakes and fixtures for the shortcode tests.
"""

from dataclasses import dataclass

import pytest

from pardot_shortcodes.entities import CatalogEntity, EntityKind
from pardot_shortcodes.exceptions import CacheStoreError
from pardot_shortcodes.services import CatalogCache, ShortcodeResolver

CONTACT_FORM = CatalogEntity(
    name="Contact Us",
    embed_code='<iframe src="http://go.pardot.com/f/1"></iframe>',
)
NEWSLETTER_FORM = CatalogEntity(
    name="Newsletter Signup",
    embed_code='<iframe src="https://go.pardot.com/f/2" width="100%" height="300" type="text/html"></iframe>',
)
PROMO_CONTENT = CatalogEntity(
    name="Homepage Promo",
    embed_code=(
        '<script type="text/javascript" src="https://go.pardot.com/dcjs/1/2/dc.js"></script>'
        '<div data-dc-url="https://go.pardot.com/dc/2" style="height:auto;width:auto;" '
        'class="pardotdc">Default promo</div>'
    ),
)


class FakeCacheStore:
    """In-memory CacheStore that records traffic."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.loads: list[str] = []
        self.saves: list[str] = []
        self.fail_load = False
        self.fail_save = False

    def load(self, key: str) -> bytes | None:
        self.loads.append(key)
        if self.fail_load:
            raise CacheStoreError("store is down")
        return self.data.get(key)

    def save(self, key: str, value: bytes) -> None:
        self.saves.append(key)
        if self.fail_save:
            raise CacheStoreError("store is down")
        self.data[key] = value


class FakeFetcher:
    """CatalogFetcher returning canned catalogs and counting calls."""

    def __init__(self, catalogs: dict[EntityKind, list[CatalogEntity]] | None = None) -> None:
        self.catalogs = catalogs or {}
        self.calls: list[EntityKind] = []
        self.error: Exception | None = None

    async def fetch(self, kind: EntityKind) -> list[CatalogEntity]:
        self.calls.append(kind)
        if self.error is not None:
            raise self.error
        return list(self.catalogs.get(kind, []))


@dataclass
class FakeSiteConfig:
    force_https: bool = False
    secure_host: str = "go.pardot.com"


@pytest.fixture
def store():
    return FakeCacheStore()


@pytest.fixture
def fetcher():
    return FakeFetcher(
        {
            EntityKind.FORM: [CONTACT_FORM, NEWSLETTER_FORM],
            EntityKind.DYNAMIC_CONTENT: [PROMO_CONTENT],
        }
    )


@pytest.fixture
def site_config():
    return FakeSiteConfig()


@pytest.fixture
def catalog_cache(store, fetcher):
    return CatalogCache(store=store, fetcher=fetcher)


@pytest.fixture
def resolver(catalog_cache, site_config):
    return ShortcodeResolver(cache=catalog_cache, site_config=site_config)
