"""
Supported content languages.
Closed set - any code outside it is rejected wherever a language appears.
"""
from typing import Any

from app.core.exceptions import InvalidArgument

SUPPORTED_LANGUAGES = ("en", "vi", "fr", "es", "ja")
DEFAULT_LANGUAGE = "en"


def is_supported_language(value: Any) -> bool:
    return isinstance(value, str) and value in SUPPORTED_LANGUAGES


def supported_languages_text() -> str:
    return ", ".join(SUPPORTED_LANGUAGES)


def ensure_supported_language(value: Any) -> str:
    """
    Validate a language code.

    Raises:
        InvalidArgument: naming the offending code and the supported list
    """
    if not is_supported_language(value):
        raise InvalidArgument(
            "INVALID_LANGUAGE",
            lang=value,
            supported=supported_languages_text(),
        )
    return value
