"""
Business logic services
Content kinds share one generic service; each service works on a request-scoped session.
"""
from app.services.content_service import ContentService
from app.services.sitemap_service import SitemapService
from app.services.slug_service import SlugService
from app.services.localization_service import LocalizationService
from app.services.admin_service import AdminService
from app.services.statistics_service import StatisticsService

__all__ = [
    "ContentService",
    "SitemapService",
    "SlugService",
    "LocalizationService",
    "AdminService",
    "StatisticsService",
]
