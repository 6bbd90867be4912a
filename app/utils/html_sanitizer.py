"""
Allow-list HTML sanitizer for rich-text content fields.
Content is rendered as HTML by the site, so stored markup is cleaned first.
"""
import nh3

ALLOWED_TAGS = {
    "b", "i", "em", "strong", "a", "p", "div", "br",
    "ul", "li", "ol", "h1", "h2", "h3", "img",
}

ALLOWED_ATTRIBUTES = {
    "a": {"href", "target"},
    "img": {"src", "alt"},
}


def sanitize_html(content: str) -> str:
    """
    Strip every tag and attribute outside the allow-list.
    Script and style elements are dropped together with their content.
    """
    if not content:
        return ""
    return nh3.clean(
        content,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        link_rel=None,
    )
