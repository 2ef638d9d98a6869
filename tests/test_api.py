"""
Tests for the shortcode HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from pardot_shortcodes.api.app import app
from pardot_shortcodes.api.dependencies import get_handler
from pardot_shortcodes.exceptions import AuthenticationError
from pardot_shortcodes.handlers import ShortcodeHandler


@pytest.fixture
def handler(resolver):
    return ShortcodeHandler(resolver=resolver, health_check=lambda: True)


@pytest.fixture
def client(handler):
    """Create a test client wired to in-memory fakes."""
    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Pardot Shortcode API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}


def test_render_form(client, site_config):
    site_config.force_https = True

    response = client.post(
        "/shortcodes/form",
        json={"title": "contact us", "height": "500", "classes": "blue"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert data["outcome"] == "found"
    assert data["refreshed"] is True
    assert "https://go.pardot.com/f/1" in data["markup"]
    assert 'class="pardotform blue"' in data["markup"]


def test_render_unknown_form_is_empty(client):
    response = client.post("/shortcodes/form", json={"title": "Nope"})

    assert response.status_code == 200
    data = response.json()
    assert data["markup"] == ""
    assert data["outcome"] == "not_found"


def test_render_without_identifier(client):
    response = client.post("/shortcodes/form", json={"height": "500"})

    assert response.status_code == 200
    assert response.json()["outcome"] == "no_identifier"


def test_render_dynamic_content(client):
    response = client.post(
        "/shortcodes/dynamic-content",
        json={"name": "Homepage Promo", "width": "50%"},
    )

    assert response.status_code == 200
    assert "width:50%" in response.json()["markup"]


def test_render_reports_fetch_failure(client, fetcher):
    fetcher.error = AuthenticationError("bad key")

    response = client.post("/shortcodes/form", json={"title": "Contact Us"})

    assert response.status_code == 200
    assert response.json()["outcome"] == "fetch_failed"


def test_refresh_catalogs(client):
    response = client.post("/catalog/refresh")

    assert response.status_code == 200
    data = response.json()
    assert data["forms"] == 2
    assert data["dynamic_content"] == 1


def test_refresh_catalogs_fetch_failure(client, fetcher):
    fetcher.error = AuthenticationError("bad key")

    response = client.post("/catalog/refresh")

    assert response.status_code == 502


def test_render_unexpected_error_degrades_to_empty_markup(client, fetcher):
    fetcher.error = RuntimeError("boom")

    response = client.post("/shortcodes/form", json={"title": "Contact Us"})

    assert response.status_code == 200
    data = response.json()
    assert data["markup"] == ""
    assert data["outcome"] == "fetch_failed"
    assert data["found"] is False
