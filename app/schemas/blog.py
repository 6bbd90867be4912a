"""
Pydantic schemas for Blog API
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import LanguageMixin


class BlogTranslationFields(BaseModel):
    """Translatable blog content"""
    title: str = Field(..., min_length=1)
    meta_title: str = ""
    meta_description: str = Field("", max_length=160)
    og_title: str = ""
    og_description: str = ""
    content: str = ""  # HTML, sanitized before storage


class BlogTranslationCreate(LanguageMixin, BlogTranslationFields):
    """Schema for one blog translation"""


class BlogTranslationResponse(BlogTranslationFields):
    id: int
    language: str

    class Config:
        from_attributes = True


class BlogCreate(BaseModel):
    """Schema for creating a blog; slug is derived from the first title when omitted"""
    slug: Optional[str] = None
    image: str = ""
    alt_text: str = ""
    canonical_url: str = ""
    date: Optional[datetime] = None
    type: int = Field(1, ge=1, le=3)  # 1: project, 2: achievements, 3: resources
    translations: List[BlogTranslationCreate] = Field(default_factory=list)


class BlogUpdate(BaseModel):
    """Schema for updating a blog; translations replace the whole set"""
    slug: Optional[str] = None
    image: Optional[str] = None
    alt_text: Optional[str] = None
    canonical_url: Optional[str] = None
    date: Optional[datetime] = None
    type: Optional[int] = Field(None, ge=1, le=3)
    translations: Optional[List[BlogTranslationCreate]] = None


class BlogResponse(BaseModel):
    """Schema for blog response"""
    id: int
    slug: str
    image: str
    alt_text: str
    canonical_url: str
    date: Optional[datetime] = None
    type: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    translations: List[BlogTranslationResponse] = []

    class Config:
        from_attributes = True
