from django.urls import path
from django.views.generic import RedirectView

from grizzly.marketing import views

app_name = "marketing"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path(
        "home/",
        RedirectView.as_view(pattern_name="marketing:home", permanent=True),
        name="home_redirect",
    ),
    path("about/", views.AboutView.as_view(), name="about"),
    path("work/", views.WorkListView.as_view(), name="work"),
    path("work/<slug:slug>/", views.WorkDetailView.as_view(), name="work_detail"),
    path("contact/", views.ContactView.as_view(), name="contact"),
    path("newsletter/", views.newsletter_subscribe, name="newsletter"),
]
