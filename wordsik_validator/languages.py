"""
Language helpers: per-language character allow-lists and path language lookup.

Latin-script languages are checked against an enumerated alphabet. Arabic and
Korean are checked by Unicode block membership instead.
"""

import re
from pathlib import PurePath
from typing import Dict, List, Optional, Union

from .config import Config


PUNCTUATION = r"\s\-'.,!?"

LANGUAGE_PATTERNS: Dict[str, "re.Pattern"] = {
    "en": re.compile(rf"[a-zA-Z{PUNCTUATION}]+"),
    "es": re.compile(rf"[a-zA-ZáéíóúñüÁÉÍÓÚÑÜ{PUNCTUATION}]+"),
    "fr": re.compile(rf"[a-zA-ZàâäéèêëïîôöùûüÿçÀÂÄÉÈÊËÏÎÔÖÙÛÜŸÇ{PUNCTUATION}]+"),
    # Arabic block U+0600-U+06FF, Hangul syllables U+AC00-U+D7AF
    "ar": re.compile(rf"[\u0600-\u06FF{PUNCTUATION}]+"),
    "ko": re.compile(rf"[\uAC00-\uD7AF{PUNCTUATION}]+"),
}

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "ar": "Arabic",
    "ko": "Korean",
}


def is_valid_language(language: str) -> bool:
    return language in Config.SUPPORTED_LANGUAGES


def get_language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, language)


def extract_language_from_path(path: Union[str, PurePath]) -> Optional[str]:
    """Return the first path segment that is a supported language code."""
    for part in PurePath(path).parts:
        if is_valid_language(part):
            return part
    return None


def validate_characters(text: str, language: str) -> bool:
    """
    Check that text only uses characters sanctioned for a language.

    Languages without a pattern are accepted as-is.
    """
    pattern = LANGUAGE_PATTERNS.get(language)
    if pattern is None:
        return True
    return bool(pattern.fullmatch(text))


def find_invalid_characters(text: str, language: str) -> List[str]:
    """List the distinct characters of text that the language does not allow."""
    pattern = LANGUAGE_PATTERNS.get(language)
    if pattern is None:
        return []
    invalid: List[str] = []
    for char in text:
        if not pattern.fullmatch(char) and char not in invalid:
            invalid.append(char)
    return invalid
