"""
Banner model - hero banners with per-language copy
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Banner(Base):
    """Banner aggregate"""

    __tablename__ = "banners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    image = Column(String(500), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    translations = relationship(
        "BannerTranslation",
        back_populates="banner",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BannerTranslation.id",
    )

    def __repr__(self):
        return f"<Banner(id={self.id}, slug={self.slug})>"


class BannerTranslation(Base):
    """Language-specific banner copy"""

    __tablename__ = "banner_translations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    banner_id = Column(Integer, ForeignKey("banners.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(10), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    meta_description = Column(String(160), nullable=False, default="")
    keywords = Column(JSON, nullable=False, default=list)

    banner = relationship("Banner", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("banner_id", "language", name="uq_banner_translation_language"),
    )

    def __repr__(self):
        return f"<BannerTranslation(banner_id={self.banner_id}, language={self.language})>"
