"""
Form submission services shared by the JSON API and the HTML pages.

Both entry points validate input first (DRF serializers for the API, Django
forms for the pages) and then hand the cleaned values to the functions here.
Each function makes the email relay calls and returns a ``SubmissionResult``
that the caller translates into a response; nothing raises past this layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus

from django.utils.translation import gettext as _

from grizzly.marketing import emails

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    message: str
    company: str = ""
    phone: str = ""
    budget: str = ""


@dataclass(frozen=True)
class SubmissionResult:
    """Success payload or typed failure for a form submission."""

    ok: bool
    message: str
    status: HTTPStatus
    message_id: str | None = None

    @classmethod
    def success(cls, message: str, message_id: str | None = None) -> SubmissionResult:
        return cls(ok=True, message=message, status=HTTPStatus.OK, message_id=message_id)

    @classmethod
    def upstream_failure(cls, message: str) -> SubmissionResult:
        return cls(ok=False, message=message, status=HTTPStatus.INTERNAL_SERVER_ERROR)


def submit_contact(submission: ContactSubmission) -> SubmissionResult:
    """Relay a validated contact submission to the team inbox."""
    result = emails.send_contact_notification(submission)
    if not result.sent:
        logger.warning("Contact submission from %s was not relayed", submission.email)
        return SubmissionResult.upstream_failure(
            _("Failed to send email. Please try again."),
        )
    return SubmissionResult.success(
        _("Email sent successfully!"),
        message_id=result.message_id,
    )


def subscribe_newsletter(email: str) -> SubmissionResult:
    """
    Welcome a validated subscriber and notify the team.

    The welcome email goes first; if it fails the team is not notified.
    """
    failure = SubmissionResult.upstream_failure(
        _("Failed to subscribe. Please try again."),
    )

    welcome = emails.send_newsletter_welcome(email)
    if not welcome.sent:
        logger.warning("Newsletter welcome for %s was not delivered", email)
        return failure

    notification = emails.send_newsletter_notification(email)
    if not notification.sent:
        logger.warning("Newsletter notification for %s was not delivered", email)
        return failure

    return SubmissionResult.success(
        _("Successfully subscribed to newsletter!"),
        message_id=welcome.message_id,
    )
