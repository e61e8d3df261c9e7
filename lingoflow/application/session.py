"""UI-neutral orchestration of lesson fetches and pronunciation playback."""

from __future__ import annotations

from typing import Any, Callable

from ..domain.language import Language, coerce_language
from .lesson_store import LessonStore
from .playback import PlaybackSession
from .ports import LessonPort

Work = Callable[[], Any]
Done = Callable[[Any], None]
BackgroundRunner = Callable[[Work, Done], None]


def run_inline(work: Work, on_done: Done) -> None:
    on_done(work())


class LearningSession:
    def __init__(
        self,
        store: LessonStore,
        lesson_requester: LessonPort,
        playback: PlaybackSession,
        logger,
        *,
        language: Language | str = Language.ENGLISH,
        run_in_background: BackgroundRunner | None = None,
    ) -> None:
        self.store = store
        self.lesson_requester = lesson_requester
        self.playback = playback
        self.logger = logger
        self.language = coerce_language(language)
        self.topic = ""
        self.run_in_background = run_in_background or run_inline

    def start(self) -> None:
        self.request_lesson()

    def set_language(self, language: Language | str) -> bool:
        """Switch language and refetch; return False when it was already active."""
        selected = coerce_language(language)
        if selected is self.language:
            return False
        self.logger.info("Language changed: %s -> %s", self.language.value, selected.value)
        self.language = selected
        self.request_lesson()
        return True

    def request_lesson(self, topic: str | None = None) -> int:
        if topic is not None:
            self.topic = topic
        language = self.language
        topic_text = (self.topic or "").strip()
        ticket = self.store.start_fetch()

        def work() -> list:
            try:
                return self.lesson_requester.fetch_lesson(language, topic_text or None)
            except Exception:
                self.logger.exception("Lesson fetch crashed")
                return []

        def on_done(words) -> None:
            self.store.complete_fetch(words or [], topic=topic_text, ticket=ticket)

        self.run_in_background(work, on_done)
        return ticket

    def play_selected(self) -> bool:
        """Play the selected word; False while no lesson is ready."""
        state = self.store.state
        word = state.current_word if state.is_ready else None
        if word is None:
            return False
        language = self.language
        self.run_in_background(
            lambda: self.playback.play(word.word, language),
            lambda _played: None,
        )
        return True
