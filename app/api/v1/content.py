"""
Content endpoints - one router per content kind, all built by the same factory.

Per kind E (blog, banner, member, contact):
- POST   /E                                       create (admin)
- GET    /E                                       paginated list
- GET    /E/sitemap                               sitemap for ?lang=
- GET    /E/{id}                                  fetch by id
- GET    /{lang}/E/{slug}                         fetch by slug + language
- PUT    /E/{id}                                  partial update (admin)
- DELETE /E/{id}                                  delete (admin)
- POST   /E/{id}/translations                     add translation (admin)
- PUT    /E/{id}/translations/{language}          upsert translation (admin)
- DELETE /E/{id}/translations/{translation_id}    delete translation (admin)
- DELETE /E/{id}/translations/language/{language} delete by language (admin)
"""
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import localized
from app.core.languages import DEFAULT_LANGUAGE
from app.core.security import get_current_admin
from app.schemas.common import Page, SitemapResponse
from app.schemas.blog import (
    BlogCreate, BlogUpdate, BlogResponse,
    BlogTranslationCreate, BlogTranslationFields, BlogTranslationResponse,
)
from app.schemas.banner import (
    BannerCreate, BannerUpdate, BannerResponse,
    BannerTranslationCreate, BannerTranslationFields, BannerTranslationResponse,
)
from app.schemas.member import (
    MemberCreate, MemberUpdate, MemberResponse,
    MemberTranslationCreate, MemberTranslationFields, MemberTranslationResponse,
)
from app.schemas.contact import (
    ContactCreate, ContactUpdate, ContactResponse,
    ContactTranslationCreate, ContactTranslationFields, ContactTranslationResponse,
)
from app.services.content_kinds import ContentKind, BLOG, BANNER, MEMBER, CONTACT
from app.services.content_service import ContentService
from app.services.sitemap_service import SitemapService
from app.utils.params import parse_pagination


def build_content_router(
    kind: ContentKind,
    create_schema,
    update_schema,
    response_schema,
    translation_create_schema,
    translation_fields_schema,
    translation_response_schema,
) -> APIRouter:
    """
    Build the router for one content kind.

    Path parameters arrive as strings and are validated by the service so
    that malformed ids produce INVALID_NUMBER_PARAM rather than a generic
    validation error.
    """
    router = APIRouter(tags=[kind.name])
    segment = kind.path_segment

    def get_service(db: Session = Depends(get_db)) -> ContentService:
        return ContentService(db, kind)

    @router.post(
        f"/{segment}",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind.name}",
    )
    async def create_entity(
        payload: create_schema,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        return service.create(payload.model_dump())

    @router.get(f"/{segment}", response_model=Page[response_schema], name=f"list_{kind.name}")
    async def list_entities(
        page: str = Query("1"),
        limit: str = Query(str(settings.DEFAULT_PAGE_LIMIT)),
        service: ContentService = Depends(get_service),
    ):
        page_number, page_size = parse_pagination(page, limit, settings.MAX_PAGE_LIMIT)
        items, total = service.list(page_number, page_size)
        return {"data": items, "total": total, "page": page_number, "limit": page_size}

    # Registered before /{id} so "sitemap" is not taken for an id
    @router.get(f"/{segment}/sitemap", response_model=SitemapResponse, name=f"{kind.name}_sitemap")
    async def entity_sitemap(
        request: Request,
        lang: str = Query(DEFAULT_LANGUAGE),
        db: Session = Depends(get_db),
    ):
        urls = SitemapService(db).build_sitemap(kind, lang)
        return {"urls": urls, "message": localized(request, "SITEMAP_GENERATED", count=len(urls))}

    @router.get(f"/{segment}/{{entity_id}}", response_model=response_schema, name=f"get_{kind.name}")
    async def get_entity(entity_id: str, service: ContentService = Depends(get_service)):
        return service.get(entity_id)

    @router.get(f"/{{lang}}/{segment}/{{slug}}", response_model=response_schema, name=f"get_{kind.name}_by_slug")
    async def get_entity_by_slug(lang: str, slug: str, service: ContentService = Depends(get_service)):
        return service.get_by_slug(slug, lang)

    @router.put(f"/{segment}/{{entity_id}}", response_model=response_schema, name=f"update_{kind.name}")
    async def update_entity(
        entity_id: str,
        payload: update_schema,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        return service.update(entity_id, payload.model_dump(exclude_unset=True))

    @router.delete(
        f"/{segment}/{{entity_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{kind.name}",
    )
    async def delete_entity(
        entity_id: str,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        service.remove(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # ==================== TRANSLATIONS ====================

    @router.post(
        f"/{segment}/{{entity_id}}/translations",
        response_model=translation_response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"add_{kind.name}_translation",
    )
    async def add_translation(
        entity_id: str,
        payload: translation_create_schema,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        return service.add_translation(entity_id, payload.model_dump())

    @router.put(
        f"/{segment}/{{entity_id}}/translations/{{language}}",
        response_model=response_schema,
        name=f"upsert_{kind.name}_translation",
    )
    async def upsert_translation(
        entity_id: str,
        language: str,
        payload: translation_fields_schema,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        return service.add_or_update_translation(entity_id, language, payload.model_dump())

    @router.delete(
        f"/{segment}/{{entity_id}}/translations/language/{{language}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{kind.name}_translation_by_language",
    )
    async def delete_translation_by_language(
        entity_id: str,
        language: str,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        service.remove_translation_by_language(entity_id, language)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        f"/{segment}/{{entity_id}}/translations/{{translation_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{kind.name}_translation",
    )
    async def delete_translation(
        entity_id: str,
        translation_id: str,
        service: ContentService = Depends(get_service),
        admin: dict = Depends(get_current_admin),
    ):
        service.remove_translation(entity_id, translation_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


blog_router = build_content_router(
    BLOG, BlogCreate, BlogUpdate, BlogResponse,
    BlogTranslationCreate, BlogTranslationFields, BlogTranslationResponse,
)
banner_router = build_content_router(
    BANNER, BannerCreate, BannerUpdate, BannerResponse,
    BannerTranslationCreate, BannerTranslationFields, BannerTranslationResponse,
)
member_router = build_content_router(
    MEMBER, MemberCreate, MemberUpdate, MemberResponse,
    MemberTranslationCreate, MemberTranslationFields, MemberTranslationResponse,
)
contact_router = build_content_router(
    CONTACT, ContactCreate, ContactUpdate, ContactResponse,
    ContactTranslationCreate, ContactTranslationFields, ContactTranslationResponse,
)

content_routers: List[APIRouter] = [blog_router, banner_router, member_router, contact_router]
