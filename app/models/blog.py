"""
Blog model - articles with per-language content
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Blog(Base):
    """Blog aggregate; owns its translations"""

    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    image = Column(String(500), nullable=False, default="")
    alt_text = Column(String(255), nullable=False, default="")
    canonical_url = Column(String(500), nullable=False, default="")
    date = Column(DateTime(timezone=True), nullable=True)
    type = Column(Integer, nullable=False, default=1)  # 1: project, 2: achievements, 3: resources
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    translations = relationship(
        "BlogTranslation",
        back_populates="blog",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BlogTranslation.id",
    )

    def __repr__(self):
        return f"<Blog(id={self.id}, slug={self.slug})>"


class BlogTranslation(Base):
    """Language-specific blog content"""

    __tablename__ = "blog_translations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    blog_id = Column(Integer, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(10), nullable=False)
    title = Column(String(255), nullable=False)
    meta_title = Column(String(255), nullable=False, default="")
    meta_description = Column(String(160), nullable=False, default="")
    og_title = Column(String(255), nullable=False, default="")
    og_description = Column(String(500), nullable=False, default="")
    content = Column(Text, nullable=False, default="")  # Sanitized HTML

    blog = relationship("Blog", back_populates="translations")

    # One translation per blog per language
    __table_args__ = (
        UniqueConstraint("blog_id", "language", name="uq_blog_translation_language"),
    )

    def __repr__(self):
        return f"<BlogTranslation(blog_id={self.blog_id}, language={self.language})>"
