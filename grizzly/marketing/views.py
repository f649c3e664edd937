from typing import Any

from django.conf import settings
from django.contrib import messages
from django.http import Http404
from django.http import HttpRequest
from django.http import HttpResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import get_language
from django.utils.translation import gettext_lazy as _
from django.views import generic
from django.views.decorators.http import require_GET
from django.views.decorators.http import require_POST

from grizzly.blog.constants import CATEGORY_PARAM
from grizzly.blog.constants import LATEST_POSTS_LIMIT
from grizzly.content.catalog import get_catalog
from grizzly.content.repository import ContentNotFoundError
from grizzly.content.schemas import WorkProject
from grizzly.core.mixins import BreadcrumbMixin
from grizzly.core.mixins import PageMetadataMixin
from grizzly.core.structured_data import service_schema
from grizzly.core.structured_data import website_schema
from grizzly.marketing.forms import ContactForm
from grizzly.marketing.forms import NewsletterForm
from grizzly.marketing.services import submit_contact
from grizzly.marketing.services import subscribe_newsletter

HOME_BREADCRUMB = {"name": _("Home"), "url": reverse_lazy("marketing:home")}

SERVICES = [
    (
        _("Web Development"),
        _("Custom websites and web applications built with modern frameworks."),
    ),
    (
        _("Mobile App Development"),
        _("Native and cross-platform apps for iOS and Android."),
    ),
    (
        _("E-commerce Solutions"),
        _("Storefronts, checkout flows and integrations that convert."),
    ),
    (
        _("SEO & Performance"),
        _("Fast, discoverable sites tuned for Core Web Vitals."),
    ),
]


class HomeView(PageMetadataMixin, generic.TemplateView):
    template_name = "marketing/home.html"
    section = "home"
    page_title = _("Web Development & Digital Solutions")
    page_subtitle = _(
        "We build websites, apps and online stores that drive real results.",
    )

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        catalog = get_catalog()
        context.update(
            {
                "featured_projects": catalog.work.get_featured(),
                "latest_posts": catalog.blog.get_all()[:LATEST_POSTS_LIMIT],
                "services": SERVICES,
                "website_schema": website_schema(get_language()),
                "service_schemas": [
                    service_schema(str(name), str(description))
                    for name, description in SERVICES
                ],
            },
        )
        return context


class AboutView(BreadcrumbMixin, PageMetadataMixin, generic.TemplateView):
    template_name = "marketing/about.html"
    section = "about"
    page_title = _("About us")
    page_subtitle = _(
        "A small team of engineers and designers based in Brandenburg, Germany.",
    )
    breadcrumbs = [HOME_BREADCRUMB, {"name": _("About"), "url": ""}]


class WorkListView(BreadcrumbMixin, PageMetadataMixin, generic.ListView):
    template_name = "marketing/work_list.html"
    context_object_name = "projects"
    section = "work"
    page_title = _("Our work")
    page_subtitle = _("Selected client projects across e-commerce and beyond.")
    breadcrumbs = [HOME_BREADCRUMB, {"name": _("Work"), "url": ""}]

    def get_selected_category(self) -> str:
        return self.request.GET.get(CATEGORY_PARAM, "").strip()

    def get_queryset(self):
        repository = get_catalog().work
        category = self.get_selected_category()
        if category:
            return repository.get_by_category(category)
        return repository.get_all()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "categories": get_catalog().work.get_all_categories(),
                "selected_category": self.get_selected_category(),
                "category_param": CATEGORY_PARAM,
            },
        )
        return context


class WorkDetailView(BreadcrumbMixin, generic.DetailView):
    template_name = "marketing/work_detail.html"
    context_object_name = "project"

    def get_object(self, queryset=None) -> WorkProject:
        try:
            return get_catalog().work.get_by_slug(self.kwargs["slug"])
        except ContentNotFoundError as exc:
            raise Http404(_("Project not found.")) from exc

    def get_breadcrumbs(self):
        breadcrumbs = super().get_breadcrumbs()
        breadcrumbs.extend(
            [
                HOME_BREADCRUMB,
                {"name": _("Work"), "url": reverse_lazy("marketing:work")},
            ],
        )
        if getattr(self, "object", None):
            breadcrumbs.append({"name": self.object.title, "url": ""})
        return breadcrumbs

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        project: WorkProject = self.object
        context.update(
            {
                "section": "work",
                "page_title": project.title,
                "page_subtitle": project.category,
                "related_projects": get_catalog().work.get_related(project.slug),
            },
        )
        return context


class ContactView(BreadcrumbMixin, PageMetadataMixin, generic.FormView):
    """
    Contact page. A valid POST is relayed by email and redirects back here
    with a flash message; relay failures keep the form filled in.
    """

    template_name = "marketing/contact.html"
    form_class = ContactForm
    section = "contact"
    page_title = _("Contact us")
    page_subtitle = _("Tell us about your project and we'll get back to you.")
    breadcrumbs = [HOME_BREADCRUMB, {"name": _("Contact"), "url": ""}]

    def get_success_url(self) -> str:
        return reverse("marketing:contact")

    def form_valid(self, form: ContactForm) -> HttpResponse:
        result = submit_contact(form.to_submission())
        if not result.ok:
            messages.error(self.request, result.message)
            return self.render_to_response(
                self.get_context_data(form=form),
                status=result.status,
            )

        messages.success(
            self.request,
            _("Thanks for reaching out. A member of the team will respond soon."),
        )
        return super().form_valid(form)

    def form_invalid(self, form: ContactForm) -> HttpResponse:
        messages.error(
            self.request,
            _(
                "We couldn't send your message. Please correct "
                "the highlighted fields and try again.",
            ),
        )
        return super().form_invalid(form)


@require_POST
def newsletter_subscribe(request: HttpRequest) -> HttpResponse:
    """Footer newsletter form. Always redirects back to the referring page."""
    form = NewsletterForm(request.POST)
    if form.is_valid():
        result = subscribe_newsletter(form.cleaned_data["email"])
        if result.ok:
            messages.success(request, result.message)
        else:
            messages.error(request, result.message)
    else:
        error = next(iter(form.errors.values()))[0]
        messages.error(request, error)

    return redirect(_safe_next_url(request))


def _safe_next_url(request: HttpRequest) -> str:
    candidate = request.POST.get("next") or request.headers.get("Referer", "")
    if candidate and url_has_allowed_host_and_scheme(
        candidate,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return candidate
    return reverse("marketing:home")


@require_GET
def robots_txt(request: HttpRequest) -> HttpResponse:
    sitemap_url = f"{settings.SITE_URL.rstrip('/')}{reverse('sitemap')}"
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /api/",
        "",
        f"Sitemap: {sitemap_url}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain")
