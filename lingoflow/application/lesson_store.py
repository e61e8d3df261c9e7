"""Lesson state snapshots, pure transitions, and the observable store."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Sequence

from ..constants import HISTORY_LIMIT
from ..domain.vocabulary import Lesson, VocabularyWord, build_lesson


class LessonStatus(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class LessonState:
    words: tuple[VocabularyWord, ...] = ()
    selected_index: int = 0
    history: tuple[Lesson, ...] = ()
    active_lesson_id: str | None = None
    is_loading: bool = False
    fetch_generation: int = 0

    @property
    def status(self) -> LessonStatus:
        if self.is_loading:
            return LessonStatus.LOADING
        if self.words:
            return LessonStatus.READY
        return LessonStatus.EMPTY

    @property
    def is_ready(self) -> bool:
        return self.status is LessonStatus.READY

    @property
    def current_word(self) -> VocabularyWord | None:
        if 0 <= self.selected_index < len(self.words):
            return self.words[self.selected_index]
        return None

    @property
    def can_go_previous(self) -> bool:
        return self.status is LessonStatus.READY and self.selected_index > 0

    @property
    def can_go_next(self) -> bool:
        return self.status is LessonStatus.READY and self.selected_index < len(self.words) - 1


def start_fetch(state: LessonState) -> LessonState:
    return replace(state, is_loading=True, fetch_generation=state.fetch_generation + 1)


def complete_fetch(
    state: LessonState,
    words: Sequence[VocabularyWord],
    *,
    topic: str | None,
    lesson_id: str,
    timestamp: float,
    history_limit: int = HISTORY_LIMIT,
    ticket: int | None = None,
    discard_stale: bool = False,
) -> LessonState:
    """Apply a finished fetch.

    Empty words leave the lesson and history untouched and only clear loading.
    With discard_stale, a ticket older than the latest start_fetch is ignored.
    """
    if discard_stale and ticket is not None and ticket < state.fetch_generation:
        return state
    if not words:
        return replace(state, is_loading=False)
    lesson = build_lesson(words, lesson_id=lesson_id, topic=topic, timestamp=timestamp)
    history = (lesson,) + state.history
    return replace(
        state,
        words=lesson.words,
        selected_index=0,
        history=history[: max(1, int(history_limit))],
        active_lesson_id=lesson.id,
        is_loading=False,
    )


def select_word(state: LessonState, index: int) -> LessonState:
    if state.status is not LessonStatus.READY:
        return state
    if not 0 <= index < len(state.words):
        return state
    if index == state.selected_index:
        return state
    return replace(state, selected_index=index)


def previous_word(state: LessonState) -> LessonState:
    return select_word(state, state.selected_index - 1)


def next_word(state: LessonState) -> LessonState:
    return select_word(state, state.selected_index + 1)


def select_from_history(state: LessonState, lesson_id: str) -> LessonState:
    for lesson in state.history:
        if lesson.id == lesson_id:
            return replace(
                state,
                words=lesson.words,
                selected_index=0,
                active_lesson_id=lesson.id,
            )
    return state


Listener = Callable[[LessonState], None]


def _short_id() -> str:
    return uuid.uuid4().hex[:9]


class LessonStore:
    """Holds the current snapshot and notifies subscribers on every change.

    Not thread-safe: callers apply transitions from the UI thread only.
    """

    def __init__(
        self,
        *,
        history_limit: int = HISTORY_LIMIT,
        discard_stale_fetches: bool = False,
        id_factory: Callable[[], str] = _short_id,
        clock: Callable[[], float] = time.time,
        logger=None,
    ) -> None:
        self.history_limit = max(1, int(history_limit))
        self.discard_stale_fetches = bool(discard_stale_fetches)
        self.id_factory = id_factory
        self.clock = clock
        self.logger = logger
        self._state = LessonState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> LessonState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _apply(self, new_state: LessonState) -> LessonState:
        if new_state is self._state:
            return new_state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def start_fetch(self) -> int:
        """Enter LOADING and return the ticket for this fetch."""
        state = self._apply(start_fetch(self._state))
        return state.fetch_generation

    def complete_fetch(
        self,
        words: Sequence[VocabularyWord],
        *,
        topic: str | None = None,
        ticket: int | None = None,
    ) -> LessonState:
        previous = self._state
        updated = complete_fetch(
            previous,
            words,
            topic=topic,
            lesson_id=self.id_factory() if words else "",
            timestamp=self.clock(),
            history_limit=self.history_limit,
            ticket=ticket,
            discard_stale=self.discard_stale_fetches,
        )
        if self.logger is not None:
            if updated is previous:
                self.logger.info(
                    "Discarded stale lesson response: ticket=%s latest=%s",
                    ticket,
                    previous.fetch_generation,
                )
            elif not words:
                self.logger.info("Lesson fetch produced no words; keeping current lesson")
        return self._apply(updated)

    def select_word(self, index: int) -> LessonState:
        return self._apply(select_word(self._state, index))

    def previous(self) -> LessonState:
        return self._apply(previous_word(self._state))

    def next(self) -> LessonState:
        return self._apply(next_word(self._state))

    def select_from_history(self, lesson_id: str) -> LessonState:
        return self._apply(select_from_history(self._state, lesson_id))
