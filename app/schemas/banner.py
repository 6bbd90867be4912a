"""
Pydantic schemas for Banner API
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import LanguageMixin


class BannerTranslationFields(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    meta_description: str = Field("", max_length=160)
    keywords: List[str] = Field(default_factory=list)


class BannerTranslationCreate(LanguageMixin, BannerTranslationFields):
    pass


class BannerTranslationResponse(BannerTranslationFields):
    id: int
    language: str

    class Config:
        from_attributes = True


class BannerCreate(BaseModel):
    slug: Optional[str] = None
    image: str = ""
    translations: List[BannerTranslationCreate] = Field(default_factory=list)


class BannerUpdate(BaseModel):
    slug: Optional[str] = None
    image: Optional[str] = None
    translations: Optional[List[BannerTranslationCreate]] = None


class BannerResponse(BaseModel):
    id: int
    slug: str
    image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    translations: List[BannerTranslationResponse] = []

    class Config:
        from_attributes = True
