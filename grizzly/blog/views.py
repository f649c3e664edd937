from typing import Any

from django.http import Http404
from django.urls import reverse
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views import generic

from grizzly.blog.constants import CATEGORY_PARAM
from grizzly.blog.constants import META_DESCRIPTION_MAX_LENGTH
from grizzly.blog.constants import RELATED_POSTS_LIMIT
from grizzly.content.catalog import get_catalog
from grizzly.content.repository import ContentNotFoundError
from grizzly.content.schemas import BlogPost
from grizzly.core.mixins import BreadcrumbMixin
from grizzly.core.mixins import PageMetadataMixin
from grizzly.core.structured_data import article_schema


class BlogPostList(BreadcrumbMixin, PageMetadataMixin, generic.ListView):
    template_name = "blog/blog_post_list.html"
    context_object_name = "blog_posts"
    section = "blog"
    page_title = _("Blog")
    page_subtitle = _(
        "Insights, guides, and case studies from the Grizzly Agency team.",
    )
    breadcrumbs = [
        {
            "name": _("Home"),
            "url": reverse_lazy("marketing:home"),
        },
        {
            "name": _("Blog"),
            "url": "",
        },
    ]

    def get_selected_category(self) -> str:
        return self.request.GET.get(CATEGORY_PARAM, "").strip()

    def get_queryset(self):
        repository = get_catalog().blog
        category = self.get_selected_category()
        if category:
            # Unknown categories simply produce an empty listing.
            return repository.get_by_category(category)
        return repository.get_all()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "categories": get_catalog().blog.get_all_categories(),
                "selected_category": self.get_selected_category(),
                "category_param": CATEGORY_PARAM,
            },
        )
        return context


class BlogPostDetail(BreadcrumbMixin, generic.DetailView):
    template_name = "blog/blog_post_detail.html"
    context_object_name = "blog_post"

    def get_object(self, queryset=None) -> BlogPost:
        slug = self.kwargs["slug"]
        try:
            return get_catalog().blog.get_by_slug(slug)
        except ContentNotFoundError as exc:
            raise Http404(_("Post not found.")) from exc

    def get_breadcrumbs(self):
        breadcrumbs = super().get_breadcrumbs()
        breadcrumbs.append(
            {
                "name": _("Home"),
                "url": reverse_lazy("marketing:home"),
            },
        )
        breadcrumbs.append(
            {
                "name": _("Blog"),
                "url": reverse_lazy("blog:blog_list"),
            },
        )
        if getattr(self, "object", None):
            breadcrumbs.append(
                {
                    "name": self.object.title,
                    "url": "",
                },
            )
        return breadcrumbs

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        blog_post: BlogPost = self.object
        path = reverse("blog:blog_post_detail", kwargs={"slug": blog_post.slug})
        absolute_url = self.request.build_absolute_uri(path)

        context.update(
            {
                "section": "blog",
                "page_title": blog_post.title,
                "page_subtitle": blog_post.excerpt,
                "related_posts": get_catalog().blog.get_related(
                    blog_post.slug,
                    limit=RELATED_POSTS_LIMIT,
                ),
                "canonical_url": absolute_url,
                "meta_description": blog_post.excerpt[:META_DESCRIPTION_MAX_LENGTH],
                "full_meta_title": _("{title} | Grizzly Agency Blog").format(
                    title=blog_post.title,
                ),
                "article_schema": article_schema(blog_post, path),
            },
        )
        return context
