"""
Combined sitemap across all content kinds
"""
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import localized
from app.core.languages import DEFAULT_LANGUAGE
from app.schemas.common import SitemapResponse
from app.services.sitemap_service import SitemapService

router = APIRouter()


@router.get("/sitemap", response_model=SitemapResponse)
async def combined_sitemap(
    request: Request,
    lang: str = Query(DEFAULT_LANGUAGE),
    db: Session = Depends(get_db),
):
    """Every listed URL for ``lang``, blog first, then banner, member, contact."""
    urls = SitemapService(db).build_combined_sitemap(lang)
    return {"urls": urls, "message": localized(request, "SITEMAP_GENERATED", count=len(urls))}
