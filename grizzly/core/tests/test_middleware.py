from http import HTTPStatus

import pytest
from django.utils import translation


@pytest.fixture(autouse=True)
def _reset_language():
    yield
    translation.activate("en")


def test_root_redirects_to_default_locale(client):
    response = client.get("/", HTTP_ACCEPT_LANGUAGE="de")

    assert response.status_code == HTTPStatus.FOUND
    assert response["Location"] == "/en/"


@pytest.mark.parametrize("locale", ["en", "de"])
def test_prefixed_page_renders_in_locale(client, locale):
    response = client.get(f"/{locale}/")

    assert response.status_code == HTTPStatus.OK
    assert response["Content-Language"] == locale
    assert f'<html lang="{locale}">' in response.content.decode()


def test_unsupported_locale_prefix_is_not_found(client):
    response = client.get("/fr/blog/")

    assert response.status_code == HTTPStatus.NOT_FOUND


def test_not_found_page_uses_browser_locale_not_previous_request(client):
    client.get("/de/")

    response = client.get("/fr/blog/", HTTP_ACCEPT_LANGUAGE="en")

    assert response.status_code == HTTPStatus.NOT_FOUND
    content = response.content.decode()
    assert '<html lang="de">' not in content
    assert '<html lang="en">' in content


def test_not_found_page_follows_accept_language(client):
    response = client.get("/fr/blog/", HTTP_ACCEPT_LANGUAGE="de")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert '<html lang="de">' in response.content.decode()


def test_missing_prefix_redirects_to_browser_locale(client):
    response = client.get(
        "/blog/",
        {"category": "Frontend"},
        HTTP_ACCEPT_LANGUAGE="de-DE,de;q=0.9",
    )

    assert response.status_code == HTTPStatus.FOUND
    assert response["Location"] == "/de/blog/?category=Frontend"
    assert "Accept-Language" in response["Vary"]


def test_missing_prefix_without_header_redirects_to_default(client):
    response = client.get("/contact/")

    assert response["Location"] == "/en/contact/"


def test_bare_locale_gets_trailing_slash(client):
    response = client.get("/de")

    assert response.status_code == HTTPStatus.MOVED_PERMANENTLY
    assert response["Location"] == "/de/"


def test_api_routes_are_not_redirected(client):
    response = client.post(
        "/api/newsletter/",
        {"email": "not-an-email"},
        content_type="application/json",
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_files_are_not_redirected(client):
    response = client.get("/robots.txt")

    assert response.status_code == HTTPStatus.OK


def test_locale_switcher_links_point_to_same_page(client):
    response = client.get("/en/blog/")

    links = {link["code"]: link for link in response.context["locale_links"]}
    assert links["de"]["url"] == "/de/blog/"
    assert links["en"]["active"] is True
    assert links["de"]["active"] is False
