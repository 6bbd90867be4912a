"""
Sitemap Service - canonical public URLs per language
"""
import logging
from typing import Any, List, Optional
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import AppError, InvalidArgument
from app.core.languages import ensure_supported_language
from app.core.monitoring import service_operation
from app.core.redis import cache, sitemap_cache_key
from app.services.content_kinds import ContentKind, CONTENT_KINDS

logger = logging.getLogger(__name__)


def _has_content(value: Any) -> bool:
    """Non-blank string, or a list holding at least one non-blank string."""
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return any(isinstance(item, str) and item.strip() for item in value)
    return value is not None


class SitemapService:
    """
    Builds sitemap URL lists from aggregates that have a complete
    translation in the requested language.
    """

    def __init__(self, db: Session, domain: Optional[str] = None, use_cache: bool = True):
        self.db = db
        self.domain = (domain if domain is not None else settings.DOMAIN).rstrip("/")
        self.use_cache = use_cache
        self.entity_name = "sitemap"

    def is_listed(self, kind: ContentKind, aggregate, language: str) -> bool:
        """Whether ``aggregate`` qualifies for the ``language`` sitemap."""
        if not aggregate.id or aggregate.id <= 0 or not aggregate.slug:
            logger.warning(f"Invalid {kind.name} data: id={aggregate.id}, slug={aggregate.slug}")
            return False

        if kind.active_field and not getattr(aggregate, kind.active_field):
            return False

        for translation in aggregate.translations:
            if translation.language != language or not translation.id:
                continue
            if all(_has_content(getattr(translation, f)) for f in kind.required_fields):
                return True
        return False

    def build_url(self, kind: ContentKind, aggregate, language: str) -> str:
        return f"{self.domain}/{language}/{kind.path_segment}/{aggregate.slug}"

    @service_operation
    def build_sitemap(self, kind: ContentKind, language: str) -> List[str]:
        """
        URLs for one content kind, ordered by aggregate id.

        Raises:
            InvalidArgument: unsupported language; also an empty result when
                SITEMAP_EMPTY_IS_ERROR is enabled
        """
        language = ensure_supported_language(language)

        cache_key = sitemap_cache_key(kind.name, language)
        urls = cache.get(cache_key) if self.use_cache else None

        if urls is None:
            aggregates = self.db.query(kind.model).order_by(kind.model.id.asc()).all()
            urls = [
                self.build_url(kind, aggregate, language)
                for aggregate in aggregates
                if self.is_listed(kind, aggregate, language)
            ]
            if self.use_cache:
                cache.set(cache_key, urls, ttl=settings.SITEMAP_CACHE_TTL)
            logger.debug(f"Built {kind.name} sitemap ({language}): {len(urls)} of {len(aggregates)}")

        if not urls and settings.SITEMAP_EMPTY_IS_ERROR:
            raise InvalidArgument("NO_VALID_TRANSLATIONS", lang=language)
        return urls

    def build_combined_sitemap(self, language: str) -> List[str]:
        """
        URLs of every content kind. A kind that fails contributes nothing;
        an unsupported language still fails the whole call.
        """
        language = ensure_supported_language(language)

        urls: List[str] = []
        for kind in CONTENT_KINDS.values():
            try:
                urls.extend(self.build_sitemap(kind, language))
            except AppError as e:
                logger.warning(f"Skipping {kind.name} in combined sitemap ({language}): {e}")
        return urls
