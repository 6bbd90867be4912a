"""
SQLAlchemy models
"""
from app.models.blog import Blog, BlogTranslation
from app.models.banner import Banner, BannerTranslation
from app.models.member import Member, MemberTranslation
from app.models.contact import Contact, ContactTranslation
from app.models.admin import Admin
from app.models.statistics import Statistics

__all__ = [
    "Blog",
    "BlogTranslation",
    "Banner",
    "BannerTranslation",
    "Member",
    "MemberTranslation",
    "Contact",
    "ContactTranslation",
    "Admin",
    "Statistics",
]

# Import Base for Alembic
from app.core.database import Base
