"""
Member model - team members
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Member(Base):
    """Member aggregate"""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    image = Column(String(500), nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)
    core = Column(Boolean, nullable=False, default=False)  # Core team member
    canonical_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    translations = relationship(
        "MemberTranslation",
        back_populates="member",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="MemberTranslation.id",
    )

    def __repr__(self):
        return f"<Member(id={self.id}, slug={self.slug}, active={self.is_active})>"


class MemberTranslation(Base):
    """Language-specific member profile"""

    __tablename__ = "member_translations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(10), nullable=False)
    name = Column(String(255), nullable=False)
    meta_title = Column(String(255), nullable=False, default="")
    meta_description = Column(String(160), nullable=False, default="")
    keywords = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False, default="")  # Sanitized HTML

    member = relationship("Member", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("member_id", "language", name="uq_member_translation_language"),
    )

    def __repr__(self):
        return f"<MemberTranslation(member_id={self.member_id}, language={self.language})>"
