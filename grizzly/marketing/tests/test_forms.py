import pytest

from grizzly.marketing.forms import ContactForm
from grizzly.marketing.forms import NewsletterForm


def test_contact_form_strips_html_and_builds_submission():
    form = ContactForm(
        data={
            "name": "  <b>Ada</b> ",
            "email": " ada@example.com ",
            "company": "Engines",
            "budget": "100",
            "message": "Line one\r\nLine <i>two</i>",
        },
    )

    assert form.is_valid(), form.errors
    submission = form.to_submission()
    assert submission.name == "Ada"
    assert submission.email == "ada@example.com"
    assert submission.message == "Line one\nLine two"
    assert submission.budget == "100"
    assert submission.phone == ""


@pytest.mark.parametrize("email", ["ada", "ada@example", "ada @example.com", "@example.com"])
def test_contact_form_rejects_malformed_email(email):
    form = ContactForm(data={"name": "Ada", "email": email, "message": "Hi"})

    assert not form.is_valid()
    assert form.errors["email"] == ["Please enter a valid email address."]


@pytest.mark.parametrize("name", ["Ada\nLovelace", "Ada\r\nBcc: x@example.com"])
def test_contact_form_rejects_multiline_name(name):
    form = ContactForm(data={"name": name, "email": "ada@example.com", "message": "Hi"})

    assert not form.is_valid()
    assert form.errors["name"] == ["Your name must fit on a single line."]


def test_contact_form_rejects_unknown_budget():
    form = ContactForm(
        data={"name": "Ada", "email": "ada@example.com", "message": "Hi", "budget": "9"},
    )

    assert not form.is_valid()
    assert "budget" in form.errors


def test_contact_form_rejects_markup_only_message():
    form = ContactForm(
        data={"name": "Ada", "email": "ada@example.com", "message": "<p> </p>"},
    )

    assert not form.is_valid()
    assert form.errors["message"] == ["Please add a little more detail."]


def test_newsletter_form_accepts_plain_address():
    form = NewsletterForm(data={"email": "reader@example.com"})

    assert form.is_valid()


def test_newsletter_form_honeypot():
    form = NewsletterForm(data={"email": "reader@example.com", "website": "x"})

    assert not form.is_valid()
    assert "website" in form.errors
