"""Lesson requests against the generative content service."""

from __future__ import annotations

import json

from ..constants import LESSON_WORD_COUNT
from ..domain.language import Language, coerce_language, prompt_language_name
from ..domain.vocabulary import InvalidWordEntry, VocabularyWord, parse_word_list
from ..errors import GeminiError
from ..integrations.gemini import GeminiSettings, generate_structured_text


def build_lesson_prompt(
    language: Language | str,
    topic: str | None = None,
    *,
    word_count: int = LESSON_WORD_COUNT,
) -> str:
    language_name = prompt_language_name(language)
    topic_text = (topic or "").strip()
    if topic_text:
        focus = f'The words MUST be strictly related to the topic: "{topic_text}".'
    else:
        focus = "The words should be of intermediate difficulty and commonly used."
    return (
        f"Generate a list of EXACTLY {word_count} useful {language_name} words "
        "for a language learner.\n"
        f"{focus}\n"
        "Provide all definitions and translations in Vietnamese.\n"
        "Ensure the words are diverse (different parts of speech if possible)."
    )


class LessonRequester:
    def __init__(
        self,
        settings: GeminiSettings,
        logger,
        *,
        word_count: int = LESSON_WORD_COUNT,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self.word_count = word_count

    def fetch_lesson(
        self,
        language: Language | str,
        topic: str | None = None,
    ) -> list[VocabularyWord]:
        """Return exactly word_count words, or an empty list when nothing usable came back."""
        language = coerce_language(language)
        prompt = build_lesson_prompt(language, topic, word_count=self.word_count)
        self.logger.info(
            "Requesting lesson: language=%s topic=%r", language.value, (topic or "").strip()
        )
        try:
            raw_text = generate_structured_text(self.settings, prompt)
        except GeminiError:
            self.logger.exception("Lesson request failed")
            return []
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError:
            self.logger.error("Failed to parse lesson response: %r", raw_text[:200])
            return []
        try:
            words = parse_word_list(payload, expected_count=self.word_count)
        except InvalidWordEntry as exc:
            self.logger.error("Discarding malformed lesson response: %s", exc)
            return []
        self.logger.info("Lesson received: words=%s", len(words))
        return words
