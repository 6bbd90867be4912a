"""
Pydantic schemas for Contact API
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import LanguageMixin

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ContactTranslationFields(BaseModel):
    address: str = Field(..., min_length=1)
    meta_description: str = Field("", max_length=160)
    keywords: List[str] = Field(default_factory=list)


class ContactTranslationCreate(LanguageMixin, ContactTranslationFields):
    pass


class ContactTranslationResponse(ContactTranslationFields):
    id: int
    language: str

    class Config:
        from_attributes = True


class ContactCreate(BaseModel):
    slug: Optional[str] = None
    phone: str = Field(..., min_length=1)
    mail: str = Field(..., pattern=EMAIL_PATTERN)
    translations: List[ContactTranslationCreate] = Field(default_factory=list)


class ContactUpdate(BaseModel):
    slug: Optional[str] = None
    phone: Optional[str] = Field(None, min_length=1)
    mail: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    translations: Optional[List[ContactTranslationCreate]] = None


class ContactResponse(BaseModel):
    id: int
    slug: str
    phone: str
    mail: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    translations: List[ContactTranslationResponse] = []

    class Config:
        from_attributes = True
