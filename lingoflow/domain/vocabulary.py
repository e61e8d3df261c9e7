"""Vocabulary entries, lessons, and validation of service payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ..constants import DEFAULT_TOPIC_LABEL

TEXT_FIELDS = (
    "word",
    "phonetic",
    "meaning",
    "part_of_speech",
    "example",
    "example_translation",
)
REQUIRED_FIELDS = TEXT_FIELDS + ("tags",)


class InvalidWordEntry(ValueError):
    """Raised when a payload entry does not describe a vocabulary word."""


@dataclass(frozen=True)
class VocabularyWord:
    word: str
    phonetic: str
    meaning: str
    part_of_speech: str
    example: str
    example_translation: str
    tags: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, item: Any) -> "VocabularyWord":
        if not isinstance(item, dict):
            raise InvalidWordEntry("Vocabulary entry must be an object.")
        missing = [name for name in REQUIRED_FIELDS if name not in item]
        if missing:
            raise InvalidWordEntry(f"Vocabulary entry is missing fields: {', '.join(missing)}")
        values: dict[str, str] = {}
        for name in TEXT_FIELDS:
            value = item[name]
            if not isinstance(value, str):
                raise InvalidWordEntry(f"Vocabulary field {name!r} must be a string.")
            values[name] = value.strip()
        raw_tags = item["tags"]
        if not isinstance(raw_tags, list):
            raise InvalidWordEntry("Vocabulary field 'tags' must be a list.")
        if not all(isinstance(tag, str) for tag in raw_tags):
            raise InvalidWordEntry("Vocabulary field 'tags' must contain only strings.")
        tags = tuple(tag.strip() for tag in raw_tags if tag.strip())
        return cls(tags=tags, **values)


@dataclass(frozen=True)
class Lesson:
    id: str
    topic: str
    words: tuple[VocabularyWord, ...]
    timestamp: float


def topic_label(topic: str | None) -> str:
    text = (topic or "").strip()
    return text or DEFAULT_TOPIC_LABEL


def parse_word_list(payload: Any, expected_count: int | None = None) -> list[VocabularyWord]:
    """Validate a decoded JSON payload into words; raise InvalidWordEntry on any defect."""
    if not isinstance(payload, list):
        raise InvalidWordEntry("Lesson payload must be a JSON array.")
    words = [VocabularyWord.from_payload(item) for item in payload]
    if expected_count is not None and len(words) != expected_count:
        raise InvalidWordEntry(
            f"Lesson payload has {len(words)} entries, expected {expected_count}."
        )
    return words


def build_lesson(
    words: Sequence[VocabularyWord],
    *,
    lesson_id: str,
    topic: str | None,
    timestamp: float,
) -> Lesson:
    return Lesson(
        id=lesson_id,
        topic=topic_label(topic),
        words=tuple(words),
        timestamp=float(timestamp),
    )
