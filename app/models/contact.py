"""
Contact model - office contact points
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Contact(Base):
    """Contact aggregate; the address lives in translations"""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(50), nullable=False)
    mail = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    translations = relationship(
        "ContactTranslation",
        back_populates="contact",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ContactTranslation.id",
    )

    def __repr__(self):
        return f"<Contact(id={self.id}, slug={self.slug})>"


class ContactTranslation(Base):
    """Language-specific contact address and SEO data"""

    __tablename__ = "contact_translations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact_id = Column(Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(10), nullable=False)
    address = Column(String(500), nullable=False)
    meta_description = Column(String(160), nullable=False, default="")
    keywords = Column(JSON, nullable=False, default=list)

    contact = relationship("Contact", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("contact_id", "language", name="uq_contact_translation_language"),
    )

    def __repr__(self):
        return f"<ContactTranslation(contact_id={self.contact_id}, language={self.language})>"
