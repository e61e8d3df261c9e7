"""Application-level ports for lesson, speech, and audio output collaborators."""

from __future__ import annotations

from typing import Protocol

from ..domain.language import Language
from ..domain.pcm import AudioBuffer
from ..domain.vocabulary import VocabularyWord


class LessonPort(Protocol):
    """Source of vocabulary lessons."""

    def fetch_lesson(
        self,
        language: Language | str,
        topic: str | None = None,
    ) -> list[VocabularyWord]: ...


class PronunciationPort(Protocol):
    """Source of raw pronunciation audio."""

    def fetch_pronunciation(self, text: str, language: Language | str) -> bytes: ...


class AudioOutputPort(Protocol):
    def play(self, buffer: AudioBuffer) -> None: ...
