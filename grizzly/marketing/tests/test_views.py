from http import HTTPStatus

import pytest
from django.core import mail
from django.core.mail import EmailMultiAlternatives
from django.urls import reverse
from django.utils import translation


@pytest.fixture(autouse=True)
def _english():
    with translation.override("en"):
        yield


def _messages(response):
    return [str(message) for message in response.context["messages"]]


@pytest.mark.parametrize(
    "url_name",
    ["marketing:home", "marketing:about", "marketing:work", "marketing:contact"],
)
def test_static_pages_render(client, url_name):
    response = client.get(reverse(url_name))

    assert response.status_code == HTTPStatus.OK
    assert 'type="application/ld+json"' in response.content.decode()


def test_home_page_shows_featured_work_and_latest_posts(client, catalog):
    response = client.get(reverse("marketing:home"))

    assert [p.slug for p in response.context["featured_projects"]] == [
        "storefront",
        "booking-app",
    ]
    assert response.context["latest_posts"][0].slug == "frontend-new"
    assert response.context["website_schema"]["inLanguage"] == "en"
    content = response.content.decode()
    assert '"@type": "WebSite"' in content
    assert '"@type": "Service"' in content


def test_home_alias_redirects_permanently(client):
    response = client.get(reverse("marketing:home_redirect"))

    assert response.status_code == HTTPStatus.MOVED_PERMANENTLY
    assert response["Location"] == reverse("marketing:home")


class TestWork:
    def test_list_filters_by_category(self, client, catalog):
        response = client.get(reverse("marketing:work"), {"category": "Mobile"})

        assert [p.slug for p in response.context["projects"]] == ["booking-app"]
        assert list(response.context["categories"]) == ["E-commerce", "Mobile"]

    def test_detail_renders_project(self, client, catalog):
        response = client.get(
            reverse("marketing:work_detail", kwargs={"slug": "storefront"}),
        )

        assert response.status_code == HTTPStatus.OK
        assert response.context["project"].title == "Storefront"
        assert [p.slug for p in response.context["related_projects"]] == ["booking-app"]

    def test_detail_unknown_slug_is_not_found(self, client, catalog):
        response = client.get(
            reverse("marketing:work_detail", kwargs={"slug": "nope"}),
        )

        assert response.status_code == HTTPStatus.NOT_FOUND


class TestContactPage:
    def test_valid_submission_sends_email_and_redirects(self, client):
        response = client.post(
            reverse("marketing:contact"),
            {
                "name": "Ada",
                "email": "ada@example.com",
                "budget": "25",
                "message": "Let's build something.",
            },
            follow=True,
        )

        assert response.redirect_chain == [(reverse("marketing:contact"), HTTPStatus.FOUND)]
        assert len(mail.outbox) == 1
        assert mail.outbox[0].subject == "New Contact Form Submission from Ada"
        assert _messages(response) == [
            "Thanks for reaching out. A member of the team will respond soon.",
        ]

    def test_invalid_submission_rerenders_form(self, client):
        response = client.post(
            reverse("marketing:contact"),
            {"name": "Ada", "email": "ada@", "message": "Hi"},
        )

        assert response.status_code == HTTPStatus.OK
        assert response.context["form"].errors["email"] == [
            "Please enter a valid email address.",
        ]
        assert mail.outbox == []

    def test_relay_failure_keeps_form_filled_in(self, client, monkeypatch):
        def _send(self, fail_silently=False):
            raise ConnectionError("relay unavailable")

        monkeypatch.setattr(EmailMultiAlternatives, "send", _send)

        response = client.post(
            reverse("marketing:contact"),
            {"name": "Ada", "email": "ada@example.com", "message": "Hi"},
        )

        assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert response.context["form"]["name"].value() == "Ada"
        assert "Failed to send email. Please try again." in _messages(response)


class TestNewsletterForm:
    def test_subscribes_and_returns_to_referring_page(self, client):
        about_url = reverse("marketing:about")

        response = client.post(
            reverse("marketing:newsletter"),
            {"email": "reader@example.com", "next": about_url},
        )

        assert response.status_code == HTTPStatus.FOUND
        assert response["Location"] == about_url
        assert len(mail.outbox) == 2

    def test_invalid_email_reports_error(self, client):
        response = client.post(
            reverse("marketing:newsletter"),
            {"email": "nope"},
            follow=True,
        )

        assert _messages(response) == ["Please enter a valid email address."]
        assert mail.outbox == []

    def test_honeypot_blocks_bots(self, client):
        client.post(
            reverse("marketing:newsletter"),
            {"email": "bot@example.com", "website": "http://spam.example"},
        )

        assert mail.outbox == []

    def test_rejects_offsite_next_url(self, client):
        response = client.post(
            reverse("marketing:newsletter"),
            {"email": "reader@example.com", "next": "https://evil.example/"},
        )

        assert response["Location"] == reverse("marketing:home")

    def test_get_is_not_allowed(self, client):
        response = client.get(reverse("marketing:newsletter"))

        assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_robots_txt_points_to_sitemap(client):
    response = client.get("/robots.txt")

    assert response["Content-Type"].startswith("text/plain")
    body = response.content.decode()
    assert "Disallow: /api/" in body
    assert "Sitemap: https://grizzly-agency.com/sitemap.xml" in body
