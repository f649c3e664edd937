"""Blog-level constants shared across views, sitemaps and templates."""

RELATED_POSTS_LIMIT = 3
LATEST_POSTS_LIMIT = 3

# Query parameter used by the list view to filter by category.
CATEGORY_PARAM = "category"

EXCERPT_PREVIEW_MAX_LENGTH = 100
META_DESCRIPTION_MAX_LENGTH = 300
