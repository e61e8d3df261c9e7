"""Domain logic for vocabulary lessons and audio decoding."""

from .language import (
    LANGUAGE_LABELS,
    Language,
    coerce_language,
    prompt_language_name,
    uses_serif_script,
    voice_for_language,
)
from .pcm import AudioBuffer, decode_pcm16
from .vocabulary import (
    InvalidWordEntry,
    Lesson,
    VocabularyWord,
    build_lesson,
    parse_word_list,
    topic_label,
)

__all__ = [
    "AudioBuffer",
    "InvalidWordEntry",
    "LANGUAGE_LABELS",
    "Language",
    "Lesson",
    "VocabularyWord",
    "build_lesson",
    "coerce_language",
    "decode_pcm16",
    "parse_word_list",
    "prompt_language_name",
    "topic_label",
    "uses_serif_script",
    "voice_for_language",
]
