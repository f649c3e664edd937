"""
Outbound emails for the contact and newsletter forms.

This module handles sending:
- a notification to the team when someone submits the contact form
- a welcome email to a new newsletter subscriber
- a notification to the team about the new subscriber

Delivery goes through Django's email backend, which is Anymail's Resend
backend in production. Each send is a single attempt: failures are logged and
reported back as a ``DeliveryResult`` and never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.defaultfilters import linebreaksbr
from django.utils import timezone
from django.utils.html import escape
from django.utils.translation import gettext as _

if TYPE_CHECKING:
    from grizzly.marketing.services import ContactSubmission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a single delivery attempt."""

    sent: bool
    message_id: str | None = None
    error: str | None = None


def get_site_url() -> str:
    return getattr(settings, "SITE_URL", "https://grizzly-agency.com")


def get_notification_recipients() -> list[str]:
    return list(getattr(settings, "GRIZZLY_NOTIFICATION_EMAILS", []))


def deliver(
    *,
    subject: str,
    text_body: str,
    html_body: str,
    to: list[str],
    from_email: str | None = None,
    reply_to: list[str] | None = None,
) -> DeliveryResult:
    """
    Send one email and report what happened.

    Args:
        subject: Subject line.
        text_body: Plain-text alternative.
        html_body: HTML body.
        to: Recipient addresses.
        from_email: Sender; defaults to ``DEFAULT_FROM_EMAIL``.
        reply_to: Optional Reply-To addresses.

    Returns:
        A DeliveryResult. ``message_id`` is filled in when the backend reports
        one (Anymail backends do).
    """
    if not to:
        logger.error("Cannot send %r: no recipients configured", subject)
        return DeliveryResult(sent=False, error="no recipients")

    message = EmailMultiAlternatives(
        subject=subject,
        body=text_body,
        from_email=from_email or settings.DEFAULT_FROM_EMAIL,
        to=to,
        reply_to=reply_to,
    )
    message.attach_alternative(html_body, "text/html")

    try:
        sent = message.send()
    except Exception as exc:
        logger.exception("Error sending email %r to %s", subject, to)
        return DeliveryResult(sent=False, error=str(exc) or exc.__class__.__name__)

    if sent == 0:
        logger.error("Email backend did not accept %r for %s", subject, to)
        return DeliveryResult(sent=False, error="not accepted by backend")

    status = getattr(message, "anymail_status", None)
    message_id = getattr(status, "message_id", None)
    logger.info("Sent email %r to %s (id=%s)", subject, to, message_id)
    return DeliveryResult(sent=True, message_id=message_id)


def send_contact_notification(submission: ContactSubmission) -> DeliveryResult:
    """Notify the team about a contact form submission."""
    subject = _("New Contact Form Submission from %(name)s") % {
        "name": submission.name,
    }

    details = [
        (_("Name"), submission.name),
        (_("Email"), submission.email),
        (_("Company"), submission.company),
        (_("Phone"), submission.phone),
        (_("Budget"), f"${submission.budget}K+" if submission.budget else ""),
    ]
    details = [(label, value) for label, value in details if value]

    plain_message = "\n".join(f"{label}: {value}" for label, value in details)
    plain_message += "\n\n" + _("Message:") + f"\n{submission.message}\n\n"
    plain_message += _("This email was sent from the Grizzly Agency contact form.")

    html_details = "".join(
        f"<p><strong>{escape(label)}:</strong> {escape(value)}</p>"
        for label, value in details
    )
    html_message = (
        f"<h2>{escape(_('New Contact Form Submission'))}</h2>"
        f"<h3>{escape(_('Contact Information'))}</h3>"
        f"{html_details}"
        f"<h3>{escape(_('Message'))}</h3>"
        f"<p>{linebreaksbr(submission.message, autoescape=True)}</p>"
        f"<p>{escape(_('This email was sent from the Grizzly Agency contact form.'))}</p>"
    )

    return deliver(
        subject=subject,
        text_body=plain_message,
        html_body=html_message,
        to=get_notification_recipients(),
        from_email=settings.GRIZZLY_CONTACT_FROM_EMAIL,
        reply_to=[submission.email],
    )


def send_newsletter_welcome(email: str) -> DeliveryResult:
    """Welcome a new subscriber."""
    site_url = get_site_url()
    subject = _("Welcome to Grizzly Agency Newsletter!")
    topics = [
        _("Latest web development insights and trends"),
        _("Technical articles and best practices"),
        _("Industry news and updates"),
        _("Exclusive tips from our development team"),
    ]
    closing = _(
        "We'll send you valuable content weekly. No spam, just quality insights "
        "to help you stay ahead in the digital world.",
    )
    year = timezone.now().year

    plain_message = (
        _("Thanks for subscribing to our newsletter")
        + "\n\n"
        + _("What to expect:")
        + "\n"
        + "\n".join(f"- {topic}" for topic in topics)
        + f"\n\n{closing}\n\n{site_url}\n\n© {year} Grizzly Agency"
    )
    html_message = (
        f"<h1>{escape(_('Welcome to Grizzly Agency!'))}</h1>"
        f"<p>{escape(_('Thanks for subscribing to our newsletter'))}</p>"
        f"<h2>{escape(_('What to expect:'))}</h2>"
        "<ul>"
        + "".join(f"<li>{escape(topic)}</li>" for topic in topics)
        + "</ul>"
        f"<p>{escape(closing)}</p>"
        f'<p><a href="{escape(site_url)}">{escape(_("Visit Our Website"))}</a></p>'
        f"<p>© {year} Grizzly Agency</p>"
    )

    return deliver(
        subject=subject,
        text_body=plain_message,
        html_body=html_message,
        to=[email],
        from_email=settings.GRIZZLY_NEWSLETTER_FROM_EMAIL,
    )


def send_newsletter_notification(email: str) -> DeliveryResult:
    """Tell the team about a new newsletter subscriber."""
    subscribed_at = timezone.localtime().strftime("%Y-%m-%d %H:%M %Z")
    subject = _("New Newsletter Subscription")
    intro = _("A new user has subscribed to the Grizzly Agency newsletter:")

    plain_message = _(
        "%(intro)s\n\nEmail: %(email)s\nSubscribed at: %(subscribed_at)s\n",
    ) % {"intro": intro, "email": email, "subscribed_at": subscribed_at}
    html_message = (
        f"<h2>{escape(subject)}</h2>"
        f"<p>{escape(intro)}</p>"
        f"<p><strong>{escape(_('Email'))}:</strong> {escape(email)}</p>"
        f"<p><strong>{escape(_('Subscribed at'))}:</strong> {escape(subscribed_at)}</p>"
    )

    return deliver(
        subject=subject,
        text_body=plain_message,
        html_body=html_message,
        to=get_notification_recipients(),
        from_email=settings.GRIZZLY_NEWSLETTER_FROM_EMAIL,
    )
