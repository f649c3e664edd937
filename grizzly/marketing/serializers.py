from rest_framework import serializers

from grizzly.marketing.constants import COMPANY_MAX_LENGTH
from grizzly.marketing.constants import EMAIL_MAX_LENGTH
from grizzly.marketing.constants import EMAIL_PATTERN
from grizzly.marketing.constants import INVALID_EMAIL_MESSAGE
from grizzly.marketing.constants import INVALID_NAME_MESSAGE
from grizzly.marketing.constants import MESSAGE_MAX_LENGTH
from grizzly.marketing.constants import NAME_MAX_LENGTH
from grizzly.marketing.constants import NEWSLETTER_REQUIRED_MESSAGE
from grizzly.marketing.constants import PHONE_MAX_LENGTH
from grizzly.marketing.services import ContactSubmission


class ContactSubmissionSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    email = serializers.CharField(max_length=EMAIL_MAX_LENGTH)
    message = serializers.CharField(max_length=MESSAGE_MAX_LENGTH)
    company = serializers.CharField(
        max_length=COMPANY_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )
    phone = serializers.CharField(
        max_length=PHONE_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )
    budget = serializers.CharField(
        max_length=20,
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )

    def validate_name(self, value: str) -> str:
        # The name ends up in the notification subject line.
        if "\r" in value or "\n" in value:
            raise serializers.ValidationError(INVALID_NAME_MESSAGE, code="multiline")
        return value

    def to_submission(self) -> ContactSubmission:
        data = self.validated_data
        return ContactSubmission(
            name=data["name"],
            email=data["email"],
            message=data["message"],
            company=data.get("company") or "",
            phone=data.get("phone") or "",
            budget=data.get("budget") or "",
        )


class NewsletterSubscriptionSerializer(serializers.Serializer):
    email = serializers.CharField(
        max_length=EMAIL_MAX_LENGTH,
        error_messages={
            "required": NEWSLETTER_REQUIRED_MESSAGE,
            "blank": NEWSLETTER_REQUIRED_MESSAGE,
            "null": NEWSLETTER_REQUIRED_MESSAGE,
        },
    )

    def validate_email(self, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise serializers.ValidationError(INVALID_EMAIL_MESSAGE)
        return value
