"""
JSON endpoints behind the contact and newsletter forms.

Both endpoints are anonymous and throttled per client. Responses follow one
shape: ``{"message": ..., "id": ...}`` on success, ``{"error": ...}`` (plus
field ``errors`` for validation problems) otherwise.
"""

from __future__ import annotations

import logging

from django.utils.translation import gettext as _
from drf_spectacular.utils import OpenApiResponse
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.views import exception_handler

from grizzly.marketing.constants import CONTACT_REQUIRED_MESSAGE
from grizzly.marketing.serializers import ContactSubmissionSerializer
from grizzly.marketing.serializers import NewsletterSubscriptionSerializer
from grizzly.marketing.services import SubmissionResult
from grizzly.marketing.services import submit_contact
from grizzly.marketing.services import subscribe_newsletter

logger = logging.getLogger(__name__)

CONTACT_REQUIRED_FIELDS = ("name", "email", "message")
MISSING_FIELD_CODES = frozenset({"required", "blank", "null"})

SUCCESS_RESPONSE = inline_serializer(
    name="FormSubmissionSuccess",
    fields={
        "message": serializers.CharField(),
        "id": serializers.CharField(allow_null=True),
    },
)
ERROR_RESPONSE = inline_serializer(
    name="FormSubmissionError",
    fields={
        "error": serializers.CharField(),
        "errors": serializers.DictField(required=False),
    },
)


def api_exception_handler(exc, context):
    """
    DRF's default handler, with ``{"detail": ...}`` bodies reshaped to the
    ``{"error": ...}`` shape the form endpoints use.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, ParseError):
        logger.info("Rejected malformed request body: %s", exc.detail)
        response.data = {"error": _("Request body could not be parsed.")}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"])}
    return response


def _result_response(result: SubmissionResult) -> Response:
    if result.ok:
        return Response(
            {"message": result.message, "id": result.message_id},
            status=result.status,
        )
    return Response({"error": result.message}, status=result.status)


def _validation_response(message: str, errors) -> Response:
    return Response(
        {"error": str(message), "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _contact_error_message(errors) -> str:
    required_errors = [
        detail for field in CONTACT_REQUIRED_FIELDS for detail in errors.get(field, ())
    ]
    if any(detail.code in MISSING_FIELD_CODES for detail in required_errors):
        return CONTACT_REQUIRED_MESSAGE
    if required_errors:
        return required_errors[0]
    return _("Please check the highlighted fields.")


class ContactSubmissionView(APIView):
    """Relay a contact form submission to the team inbox."""

    throttle_scope = "contact"

    @extend_schema(
        summary="Submit the contact form",
        request=ContactSubmissionSerializer,
        responses={
            200: SUCCESS_RESPONSE,
            400: OpenApiResponse(ERROR_RESPONSE, description="Missing or invalid fields."),
            500: OpenApiResponse(ERROR_RESPONSE, description="Email relay failed."),
        },
        tags=["Forms"],
    )
    def post(self, request):
        serializer = ContactSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            message = _contact_error_message(serializer.errors)
            return _validation_response(message, serializer.errors)

        return _result_response(submit_contact(serializer.to_submission()))


class NewsletterSubscriptionView(APIView):
    """Subscribe an email address to the newsletter."""

    throttle_scope = "newsletter"

    @extend_schema(
        summary="Subscribe to the newsletter",
        request=NewsletterSubscriptionSerializer,
        responses={
            200: SUCCESS_RESPONSE,
            400: OpenApiResponse(ERROR_RESPONSE, description="Missing or invalid email."),
            500: OpenApiResponse(ERROR_RESPONSE, description="Email relay failed."),
        },
        tags=["Forms"],
    )
    def post(self, request):
        serializer = NewsletterSubscriptionSerializer(data=request.data)
        if not serializer.is_valid():
            first_error = next(iter(serializer.errors.values()))[0]
            return _validation_response(first_error, serializer.errors)

        email = serializer.validated_data["email"]
        return _result_response(subscribe_newsletter(email))
