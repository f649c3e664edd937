"""Marketing-level constants shared by forms, serializers and views."""

import re

from django.utils.translation import gettext_lazy as _

# Deliberately loose: something@something.tld with no whitespace.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

CONTACT_REQUIRED_MESSAGE = _("Name, email, and message are required.")
NEWSLETTER_REQUIRED_MESSAGE = _("Email address is required.")
INVALID_EMAIL_MESSAGE = _("Please enter a valid email address.")
INVALID_NAME_MESSAGE = _("Your name must fit on a single line.")

NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 254
MESSAGE_MAX_LENGTH = 5000
COMPANY_MAX_LENGTH = 200
PHONE_MAX_LENGTH = 50


class BudgetChoice:
    """Budget ranges offered on the contact form, in thousands of dollars."""

    CHOICES = [
        ("", _("Select a budget")),
        ("25", _("$25K+")),
        ("50", _("$50K+")),
        ("100", _("$100K+")),
        ("150", _("$150K+")),
    ]


STATIC_PAGES = [
    # (url name, changefreq, priority)
    ("marketing:home", "weekly", 1.0),
    ("marketing:about", "monthly", 0.8),
    ("marketing:work", "weekly", 0.9),
    ("blog:blog_list", "daily", 0.8),
    ("marketing:contact", "monthly", 0.6),
]
