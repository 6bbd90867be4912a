"""
Localization Service - response messages in the caller's language
Supports the content languages (en, vi, fr, es, ja) with fallback logic.
Catalogs live in app/i18n/<lang>.json.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Dict, Any

from app.core.languages import SUPPORTED_LANGUAGES, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

CATALOG_DIR = Path(__file__).resolve().parent.parent / "i18n"


@lru_cache(maxsize=None)
def load_catalog(lang: str) -> Dict[str, str]:
    """Load one language catalog; a missing file yields an empty catalog."""
    path = CATALOG_DIR / f"{lang}.json"
    if not path.exists():
        logger.warning(f"Message catalog missing for '{lang}': {path}")
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class LocalizationService:
    """
    Resolves the response language and renders message keys.
    Priority for language: explicit query lang > Accept-Language > default.
    """

    SUPPORTED_LANGUAGES = SUPPORTED_LANGUAGES
    FALLBACK_LANG = DEFAULT_LANGUAGE

    def detect_language(
        self,
        query_lang: Optional[str] = None,
        accept_language: Optional[str] = None
    ) -> str:
        """
        Detect and normalize language code.

        Args:
            query_lang: ``lang`` query parameter (e.g. 'fr')
            accept_language: Accept-Language header (e.g. 'vi-VN,vi;q=0.9,en;q=0.8')

        Returns:
            Supported 2-letter language code
        """
        if query_lang:
            base_lang = query_lang.split('-')[0].lower().strip()
            if base_lang in self.SUPPORTED_LANGUAGES:
                return base_lang

        if accept_language:
            ranked = []
            for position, part in enumerate(accept_language.split(',')):
                pieces = part.strip().split(';')
                base_lang = pieces[0].split('-')[0].lower().strip()
                quality = 1.0
                for param in pieces[1:]:
                    name, _, value = param.strip().partition('=')
                    if name == 'q':
                        try:
                            quality = float(value)
                        except ValueError:
                            quality = 0.0
                ranked.append((-quality, position, base_lang))

            for _, _, base_lang in sorted(ranked):
                if base_lang in self.SUPPORTED_LANGUAGES:
                    return base_lang

        return self.FALLBACK_LANG

    def get_translation(
        self,
        key: str,
        lang: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Get message by key with variable substitution.

        Args:
            key: Message key (e.g., 'ENTITY_NOT_FOUND')
            lang: Language code (defaults to FALLBACK_LANG)
            variables: Variables for substitution (e.g., {'param': 'id'})

        Returns:
            Rendered text; the key itself when no catalog has it
        """
        lang = lang if lang in self.SUPPORTED_LANGUAGES else self.FALLBACK_LANG
        variables = variables or {}

        # Fallback chain: requested -> en -> key
        text = load_catalog(lang).get(key)
        if text is None and lang != self.FALLBACK_LANG:
            text = load_catalog(self.FALLBACK_LANG).get(key)
        if text is None:
            logger.warning(f"Message key not found: {key} ({lang})")
            return key

        # Substitute variables {{variable}}
        for var_key, var_value in variables.items():
            text = text.replace(f'{{{{{var_key}}}}}', str(var_value))

        return text


localization = LocalizationService()
