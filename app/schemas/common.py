"""
Shared Pydantic schemas
"""
from typing import Generic, List, TypeVar
from pydantic import BaseModel, field_validator

from app.core.languages import is_supported_language, supported_languages_text

T = TypeVar("T")


class LanguageMixin(BaseModel):
    """Adds a validated ``language`` field"""
    language: str

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        if not is_supported_language(value):
            raise ValueError(
                f"Language '{value}' is not supported. Supported languages: {supported_languages_text()}"
            )
        return value


class Page(BaseModel, Generic[T]):
    """Paginated list response"""
    data: List[T]
    total: int
    page: int
    limit: int


class SitemapResponse(BaseModel):
    urls: List[str]
    message: str
