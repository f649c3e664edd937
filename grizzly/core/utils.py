import bleach

ALLOWED_TAGS = [
    # structure
    "p",
    "br",
    "hr",
    "blockquote",
    "pre",
    # headings
    "h2",
    "h3",
    "h4",
    # lists
    "ul",
    "ol",
    "li",
    # inline
    "a",
    "strong",
    "em",
    "code",
]

ALLOWED_ATTRS = {
    "a": ["href", "title", "target", "rel"],
    # Headings keep their ids so in-page anchors work.
    "h2": ["id"],
    "h3": ["id"],
    "h4": ["id"],
    "p": ["class"],
    "code": ["class"],
}

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def render_html_safe(html: str) -> str:
    """
    Clean article HTML down to the tags a blog post body may use, then turn
    bare URLs into links. External links open in a new tab.
    """
    html = bleach.clean(
        html or "",
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )

    def set_target(attrs, new=False):
        href = attrs.get((None, "href"), "")
        if href.startswith(("http://", "https://")):
            attrs[(None, "target")] = "_blank"
            attrs[(None, "rel")] = "noopener nofollow"
        return attrs

    return bleach.linkify(html, callbacks=[set_target], skip_tags=["pre", "code"])
