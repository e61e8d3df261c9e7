"""Supported target languages and their per-language settings."""
from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    ENGLISH = "en"
    CHINESE = "zh"


LANGUAGE_LABELS = {
    Language.ENGLISH: "English",
    Language.CHINESE: "中文 (Giản thể)",
}

PROMPT_LANGUAGE_NAMES = {
    Language.ENGLISH: "English",
    Language.CHINESE: "Simplified Chinese",
}

VOICE_PROFILES = {
    Language.ENGLISH: "Kore",
    Language.CHINESE: "Puck",
}


def coerce_language(value: Language | str) -> Language:
    """Return the Language for an enum member or its code; raise ValueError otherwise."""
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unsupported language: {value!r}") from None


def voice_for_language(language: Language | str) -> str:
    return VOICE_PROFILES[coerce_language(language)]


def prompt_language_name(language: Language | str) -> str:
    return PROMPT_LANGUAGE_NAMES[coerce_language(language)]


def uses_serif_script(language: Language | str) -> bool:
    """Chinese script renders in a serif face."""
    return coerce_language(language) is Language.CHINESE
