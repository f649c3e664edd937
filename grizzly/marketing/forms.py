from __future__ import annotations

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Div
from crispy_forms.layout import Field
from crispy_forms.layout import Layout
from crispy_forms.layout import Submit
from django import forms
from django.urls import reverse
from django.utils.html import strip_tags
from django.utils.text import normalize_newlines
from django.utils.translation import gettext_lazy as _

from grizzly.marketing.constants import COMPANY_MAX_LENGTH
from grizzly.marketing.constants import EMAIL_MAX_LENGTH
from grizzly.marketing.constants import EMAIL_PATTERN
from grizzly.marketing.constants import INVALID_EMAIL_MESSAGE
from grizzly.marketing.constants import INVALID_NAME_MESSAGE
from grizzly.marketing.constants import MESSAGE_MAX_LENGTH
from grizzly.marketing.constants import NAME_MAX_LENGTH
from grizzly.marketing.constants import PHONE_MAX_LENGTH
from grizzly.marketing.constants import BudgetChoice
from grizzly.marketing.services import ContactSubmission


def _clean_email_value(value: str) -> str:
    email = (value or "").strip()
    if not EMAIL_PATTERN.match(email):
        raise forms.ValidationError(INVALID_EMAIL_MESSAGE)
    return email


class ContactForm(forms.Form):
    name = forms.CharField(
        label=_("Name"),
        max_length=NAME_MAX_LENGTH,
        widget=forms.TextInput(attrs={"autocomplete": "name"}),
    )
    email = forms.CharField(
        label=_("Email"),
        max_length=EMAIL_MAX_LENGTH,
        widget=forms.EmailInput(attrs={"autocomplete": "email"}),
    )
    company = forms.CharField(
        label=_("Company"),
        max_length=COMPANY_MAX_LENGTH,
        required=False,
        widget=forms.TextInput(attrs={"autocomplete": "organization"}),
    )
    phone = forms.CharField(
        label=_("Phone"),
        max_length=PHONE_MAX_LENGTH,
        required=False,
        widget=forms.TextInput(attrs={"autocomplete": "tel"}),
    )
    budget = forms.ChoiceField(
        label=_("Budget"),
        choices=BudgetChoice.CHOICES,
        required=False,
    )
    message = forms.CharField(
        label=_("Message"),
        max_length=MESSAGE_MAX_LENGTH,
        widget=forms.Textarea(
            attrs={
                "rows": 5,
                "placeholder": _("Tell us about your project"),
            },
        ),
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.helper = FormHelper(self)
        self.helper.form_id = "contact-form"
        self.helper.form_method = "post"
        self.helper.form_action = reverse("marketing:contact")
        self.helper.label_class = "form-label fw-semibold"
        self.helper.layout = Layout(
            Div(
                Field("name", wrapper_class="col-md-6 mb-3"),
                Field("email", wrapper_class="col-md-6 mb-3"),
                css_class="row",
            ),
            Div(
                Field("company", wrapper_class="col-md-6 mb-3"),
                Field("phone", wrapper_class="col-md-6 mb-3"),
                css_class="row",
            ),
            Field("budget", wrapper_class="mb-3"),
            Field("message", wrapper_class="mb-3"),
            Submit("submit", _("Send message"), css_class="btn btn-primary"),
        )

    def clean_name(self) -> str:
        value = strip_tags(self.cleaned_data.get("name", "")).strip()
        if not value:
            raise forms.ValidationError(_("Please tell us your name."))
        if "\r" in value or "\n" in value:
            raise forms.ValidationError(INVALID_NAME_MESSAGE)
        return value

    def clean_email(self) -> str:
        return _clean_email_value(self.cleaned_data.get("email", ""))

    def clean_message(self) -> str:
        value = normalize_newlines(strip_tags(self.cleaned_data.get("message", "")).strip())
        if not value:
            raise forms.ValidationError(_("Please add a little more detail."))
        return value

    def to_submission(self) -> ContactSubmission:
        data = self.cleaned_data
        return ContactSubmission(
            name=data["name"],
            email=data["email"],
            message=data["message"],
            company=data.get("company", ""),
            phone=data.get("phone", ""),
            budget=data.get("budget", ""),
        )


class NewsletterForm(forms.Form):
    email = forms.CharField(
        label="",
        max_length=EMAIL_MAX_LENGTH,
        widget=forms.EmailInput(
            attrs={
                "class": "form-control form-control-sm",
                "autocomplete": "email",
                "placeholder": _("Your email"),
            },
        ),
    )
    website = forms.CharField(
        label=_("Website"),
        required=False,
        widget=forms.HiddenInput(
            attrs={
                "autocomplete": "off",
            },
        ),
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.helper = FormHelper(self)
        self.helper.form_id = "newsletter-form"
        self.helper.form_method = "post"
        self.helper.form_action = reverse("marketing:newsletter")
        self.helper.form_class = "d-flex flex-column gap-2"
        self.helper.layout = Layout(
            Field("email", wrapper_class="mb-2"),
            Field("website", type="hidden", wrapper_class="d-none"),
            Submit("submit", _("Subscribe"), css_class="btn btn-secondary btn-sm"),
        )

    def clean_email(self) -> str:
        return _clean_email_value(self.cleaned_data.get("email", ""))

    def clean_website(self) -> str:
        value = self.cleaned_data.get("website", "")
        if value:
            # Hidden from humans; only bots fill it in.
            raise forms.ValidationError(_("Please leave this field blank."))
        return value
