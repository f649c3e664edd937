from django.urls import path

from grizzly.marketing import api

app_name = "api"

urlpatterns = [
    path("contact/", api.ContactSubmissionView.as_view(), name="contact"),
    path("newsletter/", api.NewsletterSubscriptionView.as_view(), name="newsletter"),
]
