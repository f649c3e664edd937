import copy

from django.conf import settings

from grizzly.core.structured_data import breadcrumb_schema


class BreadcrumbMixin:
    """
    A mixin to add breadcrumb navigation to a view.
    Override `get_breadcrumbs()` to return a list of breadcrumb items.
    Each breadcrumb is a dict with keys:
      - 'name': The text to display.
      - 'url': (Optional) The URL for that breadcrumb. For the current page,
          you may leave it empty.

    The same trail is exposed as schema.org BreadcrumbList data under
    `breadcrumb_schema` once it has more than one item.
    """

    # Define common breadcrumbs for all views.
    default_breadcrumbs = []
    # Views can override or extend this attribute.
    breadcrumbs = []

    def get_breadcrumbs(self) -> list[dict[str, str]]:
        """
        Returns a list of breadcrumb dictionaries.
        By default, it returns the `breadcrumbs` attribute.
        Override this method in your view for dynamic breadcrumbs.
        """
        breadcrumbs = self.default_breadcrumbs + self.breadcrumbs
        return copy.deepcopy(breadcrumbs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        breadcrumbs = self.get_breadcrumbs()
        context["breadcrumbs"] = breadcrumbs
        if len(breadcrumbs) > 1:
            context["breadcrumb_schema"] = breadcrumb_schema(
                breadcrumbs,
                base_url=settings.SITE_URL,
            )
        return context


class PageMetadataMixin:
    """
    Provide `page_title`, `page_subtitle` and `section` for the base template.

    Views set the class attributes or override `get_page_metadata()` when the
    values depend on the object being rendered.
    """

    section = ""
    page_title = ""
    page_subtitle = ""

    def get_page_metadata(self) -> dict:
        return {
            "section": self.section,
            "page_title": self.page_title,
            "page_subtitle": self.page_subtitle,
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(self.get_page_metadata())
        return context
