"""
Content Service - generic aggregate + translation store
One implementation serves Blog, Banner, Member and Contact; the differences
between them live in ContentKind.
"""
import logging
from typing import Optional, Dict, Any, List, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import InvalidArgument, NotFound, Conflict
from app.core.languages import ensure_supported_language
from app.core.monitoring import service_operation
from app.core.redis import invalidate_sitemaps
from app.services.content_kinds import ContentKind, META_DESCRIPTION_MAX_LENGTH
from app.services.slug_service import SlugService, normalize_slug
from app.utils.html_sanitizer import sanitize_html
from app.utils.params import parse_positive_int, parse_pagination, ensure_non_empty_string

logger = logging.getLogger(__name__)


class ContentService:
    """
    CRUD for one content kind plus its per-language translations.

    Invariants kept here:
    - at most one translation per (aggregate, language)
    - slug unique within the kind's table
    - languages always within the supported set
    """

    def __init__(self, db: Session, kind: ContentKind):
        self.db = db
        self.kind = kind
        self.entity_name = kind.name
        self.slugs = SlugService(db, kind.model)

    # ==================== TRANSLATION PAYLOADS ====================

    def _prepare_translation(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate language, keep known fields, sanitize HTML fields."""
        values = {"language": ensure_supported_language(data.get("language"))}

        for field in self.kind.translation_fields:
            if data.get(field) is None:
                continue
            value = data[field]
            if field in self.kind.html_fields:
                value = sanitize_html(value)
            values[field] = value

        meta_description = values.get("meta_description")
        if meta_description and len(meta_description) > META_DESCRIPTION_MAX_LENGTH:
            raise InvalidArgument(
                "FIELD_TOO_LONG", field="meta_description", max=META_DESCRIPTION_MAX_LENGTH
            )
        return values

    def _prepare_translations(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        prepared = []
        seen = set()
        for item in items:
            values = self._prepare_translation(item)
            if values["language"] in seen:
                raise Conflict("DUPLICATE_TRANSLATION_LANGUAGE", lang=values["language"])
            seen.add(values["language"])
            prepared.append(values)
        return prepared

    def _new_translation(self, values: Dict[str, Any]):
        return self.kind.translation_model(**values)

    @staticmethod
    def _find_translation(aggregate, language: str):
        return next((t for t in aggregate.translations if t.language == language), None)

    def _slug_source(self, translations: List[Dict[str, Any]]) -> Optional[str]:
        if not translations:
            return None
        return translations[0].get(self.kind.slug_source_field)

    def _changed(self):
        invalidate_sitemaps(self.kind.name)

    # ==================== AGGREGATE ====================

    @service_operation
    def create(self, data: Dict[str, Any]):
        """
        Create an aggregate with its translations.

        The slug comes from ``data["slug"]`` or, when absent, from the first
        translation's slug source field (title, name or address). A concurrent
        insert that wins the same slug triggers a bounded retry.

        Raises:
            InvalidArgument: bad language, empty slug candidate, field too long
            Conflict: duplicate language in payload, slug retries exhausted
        """
        translations = self._prepare_translations(data.get("translations") or [])
        candidate = data.get("slug") or self._slug_source(translations)
        fields = {f: data[f] for f in self.kind.fields if data.get(f) is not None}

        aggregate = None
        for attempt in range(1, settings.SLUG_MAX_RETRIES + 1):
            slug = self.slugs.generate_unique_slug(candidate)
            aggregate = self.kind.model(slug=slug, **fields)
            self.db.add(aggregate)
            try:
                self.db.flush()
                break
            except IntegrityError:
                self.db.rollback()
                if not self.slugs.is_taken(slug):
                    raise
                logger.warning(
                    f"Slug '{slug}' taken concurrently for {self.kind.name} "
                    f"(attempt {attempt}/{settings.SLUG_MAX_RETRIES})"
                )
                aggregate = None

        if aggregate is None:
            raise Conflict("DUPLICATE_SLUG", slug=normalize_slug(candidate))

        for values in translations:
            aggregate.translations.append(self._new_translation(values))

        self.db.commit()
        self.db.refresh(aggregate)
        self._changed()

        logger.info(f"Created {self.kind.name} id={aggregate.id} slug={aggregate.slug}")
        return aggregate

    @service_operation
    def get(self, aggregate_id):
        """
        Raises:
            InvalidArgument: id is not a positive integer
            NotFound: no such aggregate
        """
        aggregate_id = parse_positive_int(aggregate_id, "id")
        aggregate = self.db.query(self.kind.model).filter(
            self.kind.model.id == aggregate_id
        ).first()
        if not aggregate or not aggregate.slug:
            raise NotFound("ENTITY_NOT_FOUND", entity=self.kind.label)
        return aggregate

    @service_operation
    def get_by_slug(self, slug: str, language: Optional[str] = None):
        """
        Fetch by slug, optionally requiring a translation in ``language``.

        Raises:
            InvalidArgument: empty slug or unsupported language
            NotFound: ENTITY_NOT_FOUND, or TRANSLATION_NOT_FOUND when the
                aggregate exists but lacks the requested language
        """
        ensure_non_empty_string(slug, "slug")
        if language is not None:
            ensure_supported_language(language)

        aggregate = self.db.query(self.kind.model).filter(
            self.kind.model.slug == slug
        ).first()
        if not aggregate:
            raise NotFound("ENTITY_NOT_FOUND", entity=self.kind.label)

        if language and not self._find_translation(aggregate, language):
            raise NotFound("TRANSLATION_NOT_FOUND", lang=language)
        return aggregate

    @service_operation
    def list(self, page=1, limit=None) -> Tuple[list, int]:
        """Page through aggregates ordered by id. Returns (items, total)."""
        if limit is None:
            limit = settings.DEFAULT_PAGE_LIMIT
        page, limit = parse_pagination(page, limit, settings.MAX_PAGE_LIMIT)

        query = self.db.query(self.kind.model)
        total = query.count()
        items = (
            query.order_by(self.kind.model.id.asc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return items, total

    @service_operation
    def update(self, aggregate_id, data: Dict[str, Any]):
        """
        Partial update.

        - slug: regenerated only when a new explicit value differs
        - known scalar fields: merged when present
        - translations: when present, replace the whole set
        """
        aggregate = self.get(aggregate_id)

        proposed_slug = None
        new_slug = data.get("slug")
        if new_slug and new_slug != aggregate.slug:
            proposed_slug = self.slugs.generate_unique_slug(new_slug, exclude_id=aggregate.id)
            aggregate.slug = proposed_slug

        for field in self.kind.fields:
            if data.get(field) is not None:
                setattr(aggregate, field, data[field])

        if data.get("translations") is not None:
            self.replace_all_translations(aggregate, data["translations"])

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if proposed_slug and self.slugs.is_taken(proposed_slug, exclude_id=aggregate.id):
                raise Conflict("DUPLICATE_SLUG", slug=proposed_slug)
            raise

        self.db.refresh(aggregate)
        self._changed()
        return aggregate

    @service_operation
    def remove(self, aggregate_id) -> None:
        """Delete the aggregate; its translations go with it."""
        aggregate = self.get(aggregate_id)
        self.db.delete(aggregate)
        self.db.commit()
        self._changed()
        logger.info(f"Deleted {self.kind.name} id={aggregate_id}")

    # ==================== TRANSLATION STORE ====================

    @service_operation
    def add_translation(self, aggregate_id, data: Dict[str, Any]):
        """
        Raises:
            Conflict: the aggregate already has this language
        """
        aggregate = self.get(aggregate_id)
        values = self._prepare_translation(data)

        if self._find_translation(aggregate, values["language"]):
            raise Conflict("TRANSLATION_ALREADY_EXISTS", lang=values["language"])

        translation = self._new_translation(values)
        aggregate.translations.append(translation)
        self.db.commit()
        self.db.refresh(translation)
        self._changed()
        return translation

    @service_operation
    def add_or_update_translation(self, aggregate_id, language: str, data: Dict[str, Any]):
        """Upsert one language; returns the aggregate reloaded from the database."""
        aggregate = self.get(aggregate_id)
        values = self._prepare_translation({**data, "language": language})

        existing = self._find_translation(aggregate, values["language"])
        if existing:
            for field, value in values.items():
                setattr(existing, field, value)
        else:
            aggregate.translations.append(self._new_translation(values))

        self.db.commit()
        self.db.refresh(aggregate)
        self._changed()
        return aggregate

    @service_operation
    def remove_translation(self, aggregate_id, translation_id) -> None:
        translation_id = parse_positive_int(translation_id, "translationId")
        aggregate = self.get(aggregate_id)

        translation = next((t for t in aggregate.translations if t.id == translation_id), None)
        if not translation:
            raise NotFound("TRANSLATION_ID_NOT_FOUND", id=translation_id)

        aggregate.translations.remove(translation)
        self.db.commit()
        self._changed()

    @service_operation
    def remove_translation_by_language(self, aggregate_id, language: str) -> None:
        language = ensure_supported_language(language)
        aggregate = self.get(aggregate_id)

        translation = self._find_translation(aggregate, language)
        if not translation:
            raise NotFound("TRANSLATION_NOT_FOUND", lang=language)

        aggregate.translations.remove(translation)
        self.db.commit()
        self._changed()
        logger.info(f"Deleted {self.kind.name} id={aggregate.id} translation language={language}")

    @service_operation
    def replace_all_translations(self, aggregate, items: List[Dict[str, Any]]) -> None:
        """
        Delete every translation of ``aggregate`` and insert ``items``.
        Does not commit; the caller owns the transaction.
        """
        prepared = self._prepare_translations(items)

        aggregate.translations.clear()
        # Deletes must hit the table before inserts reuse (aggregate, language)
        self.db.flush()

        for values in prepared:
            aggregate.translations.append(self._new_translation(values))
        self.db.flush()
