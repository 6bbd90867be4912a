"""
FastAPI dependencies and request helpers
"""
from fastapi import Request

from app.services.localization_service import localization


def request_language(request: Request) -> str:
    """
    Language for response messages.
    Priority: ?lang= query > {lang} path segment > Accept-Language > en
    """
    query_lang = request.query_params.get("lang") or request.path_params.get("lang")
    return localization.detect_language(
        query_lang=query_lang,
        accept_language=request.headers.get("accept-language"),
    )


def localized(request: Request, key: str, **variables) -> str:
    """Render a message key in the caller's language."""
    return localization.get_translation(key, request_language(request), variables)
