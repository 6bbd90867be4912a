"""
Pydantic schemas for Member API
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import LanguageMixin


class MemberTranslationFields(BaseModel):
    name: str = Field(..., min_length=1)
    meta_title: str = ""
    meta_description: str = Field("", max_length=160)
    keywords: List[str] = Field(default_factory=list)
    description: str = ""  # HTML, sanitized before storage


class MemberTranslationCreate(LanguageMixin, MemberTranslationFields):
    pass


class MemberTranslationResponse(MemberTranslationFields):
    id: int
    language: str

    class Config:
        from_attributes = True


class MemberCreate(BaseModel):
    slug: Optional[str] = None
    image: str = ""
    is_active: bool = True
    core: bool = False
    canonical_url: Optional[str] = None
    translations: List[MemberTranslationCreate] = Field(default_factory=list)


class MemberUpdate(BaseModel):
    slug: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    core: Optional[bool] = None
    canonical_url: Optional[str] = None
    translations: Optional[List[MemberTranslationCreate]] = None


class MemberResponse(BaseModel):
    id: int
    slug: str
    image: str
    is_active: bool
    core: bool
    canonical_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    translations: List[MemberTranslationResponse] = []

    class Config:
        from_attributes = True
