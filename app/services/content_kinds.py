"""
Content kinds - the per-kind configuration that parameterizes the generic
content, translation and sitemap services.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from app.models.blog import Blog, BlogTranslation
from app.models.banner import Banner, BannerTranslation
from app.models.member import Member, MemberTranslation
from app.models.contact import Contact, ContactTranslation


@dataclass(frozen=True)
class ContentKind:
    """
    Attributes:
        name: Registry key and cache namespace ("blog")
        label: Human-readable entity name used in messages ("Blog")
        path_segment: URL segment for routes and sitemap entries
        model: Aggregate model
        translation_model: Translation model owned by the aggregate
        fields: Language-independent attributes accepted on create/update
        translation_fields: Content attributes of one translation
        required_fields: Translation attributes that must be non-empty for
            the aggregate to appear in a sitemap
        slug_source_field: Translation attribute a slug is derived from when
            no explicit slug is given
        html_fields: Translation attributes passed through the HTML sanitizer
        active_field: Aggregate flag that hides inactive rows from sitemaps
    """
    name: str
    label: str
    path_segment: str
    model: type
    translation_model: type
    fields: Tuple[str, ...]
    translation_fields: Tuple[str, ...]
    required_fields: Tuple[str, ...]
    slug_source_field: str
    html_fields: Tuple[str, ...] = ()
    active_field: Optional[str] = None


META_DESCRIPTION_MAX_LENGTH = 160

BLOG = ContentKind(
    name="blog",
    label="Blog",
    path_segment="blog",
    model=Blog,
    translation_model=BlogTranslation,
    fields=("image", "alt_text", "canonical_url", "date", "type"),
    translation_fields=(
        "title", "meta_title", "meta_description", "og_title", "og_description", "content",
    ),
    required_fields=("title", "content"),
    slug_source_field="title",
    html_fields=("content",),
)

BANNER = ContentKind(
    name="banner",
    label="Banner",
    path_segment="banner",
    model=Banner,
    translation_model=BannerTranslation,
    fields=("image",),
    translation_fields=("title", "description", "meta_description", "keywords"),
    required_fields=("title", "description"),
    slug_source_field="title",
)

MEMBER = ContentKind(
    name="member",
    label="Member",
    path_segment="member",
    model=Member,
    translation_model=MemberTranslation,
    fields=("image", "is_active", "core", "canonical_url"),
    translation_fields=(
        "name", "meta_title", "meta_description", "keywords", "description",
    ),
    required_fields=("name",),
    slug_source_field="name",
    html_fields=("description",),
    active_field="is_active",
)

CONTACT = ContentKind(
    name="contact",
    label="Contact",
    path_segment="contact",
    model=Contact,
    translation_model=ContactTranslation,
    fields=("phone", "mail"),
    translation_fields=("address", "meta_description", "keywords"),
    required_fields=("address", "meta_description", "keywords"),
    slug_source_field="address",
)

# Order matters: combined sitemaps list kinds in this order
CONTENT_KINDS: Dict[str, ContentKind] = {
    kind.name: kind for kind in (BLOG, BANNER, MEMBER, CONTACT)
}
