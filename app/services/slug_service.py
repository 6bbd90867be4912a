"""
Slug Service - URL-safe unique identifiers per content collection
"""
import re
from typing import Optional
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgument

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def normalize_slug(candidate: Optional[str]) -> str:
    """
    Lowercase, collapse every run of characters outside [a-z0-9] into a
    single hyphen and trim hyphens at both ends.

    >>> normalize_slug("  Hello, World!  ")
    'hello-world'
    """
    if not candidate:
        return ""
    return _NON_SLUG_CHARS.sub("-", candidate.lower()).strip("-")


class SlugService:
    """
    Proposes unused slugs for one aggregate model.
    Read-only: the caller persists the returned value.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def is_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(self.model.id).filter(self.model.slug == slug)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None

    def generate_unique_slug(self, candidate: Optional[str], exclude_id: Optional[int] = None) -> str:
        """
        Normalize ``candidate`` and disambiguate it against existing rows.

        Collisions get ``-1``, ``-2``, ... appended to the normalized base, so
        the result always matches ``^[a-z0-9]+(-[a-z0-9]+)*$``.

        Args:
            candidate: Free text (explicit slug or a title)
            exclude_id: Aggregate allowed to keep its own slug (updates)

        Raises:
            InvalidArgument: candidate normalizes to an empty string
        """
        base = normalize_slug(candidate)
        if not base:
            raise InvalidArgument("INVALID_PARAM", param="slug")

        slug = base
        counter = 1
        while self.is_taken(slug, exclude_id):
            slug = f"{base}-{counter}"
            counter += 1
        return slug
