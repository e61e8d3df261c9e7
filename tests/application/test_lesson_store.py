from lingoflow.application.lesson_store import (
    LessonState,
    LessonStatus,
    LessonStore,
    complete_fetch,
    next_word,
    previous_word,
    select_from_history,
    select_word,
    start_fetch,
)
from lingoflow.domain.vocabulary import VocabularyWord


def _words(prefix: str, count: int = 10) -> list[VocabularyWord]:
    return [
        VocabularyWord(
            word=f"{prefix}{index}",
            phonetic="",
            meaning=f"nghĩa {index}",
            part_of_speech="Noun",
            example="",
            example_translation="",
            tags=(),
        )
        for index in range(count)
    ]


class _Counter:
    def __init__(self):
        self.value = 0

    def __call__(self):
        self.value += 1
        return f"lesson-{self.value}"


class _Logger:
    def __init__(self):
        self.infos = []

    def info(self, message, *args):
        self.infos.append(message % args if args else message)


def _store(**kwargs) -> LessonStore:
    return LessonStore(id_factory=_Counter(), clock=lambda: 1_700_000_000.0, **kwargs)


def test_initial_state_is_empty():
    state = LessonState()

    assert state.status is LessonStatus.EMPTY
    assert state.current_word is None
    assert state.can_go_previous is False
    assert state.can_go_next is False


def test_successful_fetch_activates_lesson_and_prepends_history():
    store = _store()
    store.start_fetch()
    assert store.state.status is LessonStatus.LOADING

    state = store.complete_fetch(_words("a"), topic="Travel")

    assert state.status is LessonStatus.READY
    assert state.selected_index == 0
    assert [word.word for word in state.words][:2] == ["a0", "a1"]
    assert len(state.history) == 1
    assert state.history[0].id == "lesson-1"
    assert state.history[0].topic == "Travel"
    assert state.history[0].timestamp == 1_700_000_000.0
    assert state.active_lesson_id == "lesson-1"


def test_empty_fetch_keeps_lesson_and_history_but_clears_loading():
    store = _store()
    store.start_fetch()
    store.complete_fetch(_words("a"), topic="")
    store.select_word(4)
    before = store.state

    store.start_fetch()
    after = store.complete_fetch([], topic="Food")

    assert after.is_loading is False
    assert after.status is LessonStatus.READY
    assert after.words == before.words
    assert after.history == before.history
    assert after.selected_index == 4


def test_empty_fetch_from_empty_returns_to_empty():
    store = _store()
    store.start_fetch()

    state = store.complete_fetch([])

    assert state.status is LessonStatus.EMPTY
    assert state.history == ()


def test_history_is_capped_at_five_newest_first():
    store = _store()
    for index in range(6):
        store.start_fetch()
        store.complete_fetch(_words(f"l{index}-"), topic=f"topic {index}")

    history = store.state.history
    assert len(history) == 5
    assert [lesson.topic for lesson in history] == [
        "topic 5",
        "topic 4",
        "topic 3",
        "topic 2",
        "topic 1",
    ]
    assert all(lesson.id != "lesson-1" for lesson in history)


def test_history_allows_duplicate_topics_and_default_label():
    store = _store()
    for _ in range(2):
        store.start_fetch()
        store.complete_fetch(_words("x"), topic=None)

    assert [lesson.topic for lesson in store.state.history] == ["Tổng hợp", "Tổng hợp"]


def test_select_word_rejects_out_of_range_indices():
    store = _store()
    store.start_fetch()
    store.complete_fetch(_words("a"))

    for index in (-1, 10, 99):
        assert store.select_word(index).selected_index == 0
    assert store.select_word(7).selected_index == 7
    assert store.select_word(9).selected_index == 9


def test_select_word_is_ignored_unless_ready():
    empty = LessonState()
    assert select_word(empty, 0) is empty

    loaded = complete_fetch(
        start_fetch(LessonState()), _words("a"), topic="", lesson_id="x", timestamp=0
    )
    loading = start_fetch(loaded)
    assert select_word(loading, 3) is loading


def test_previous_and_next_stop_at_boundaries():
    state = complete_fetch(LessonState(), _words("a"), topic="", lesson_id="x", timestamp=0)

    assert previous_word(state).selected_index == 0
    assert state.can_go_previous is False
    last = select_word(state, 9)
    assert next_word(last).selected_index == 9
    assert last.can_go_next is False
    assert next_word(state).selected_index == 1
    assert previous_word(last).selected_index == 8


def test_select_from_history_restores_words_without_touching_history():
    store = _store()
    store.start_fetch()
    store.complete_fetch(_words("first"), topic="one")
    store.start_fetch()
    store.complete_fetch(_words("second"), topic="two")
    store.select_word(5)
    history_before = store.state.history

    state = store.select_from_history("lesson-1")

    assert [word.word for word in state.words][0] == "first0"
    assert state.selected_index == 0
    assert state.active_lesson_id == "lesson-1"
    assert state.history == history_before


def test_select_from_history_ignores_unknown_id():
    state = complete_fetch(LessonState(), _words("a"), topic="", lesson_id="x", timestamp=0)

    assert select_from_history(state, "missing") is state


def test_subscribers_receive_snapshots_and_can_unsubscribe():
    store = _store()
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.start_fetch()
    store.complete_fetch(_words("a"))
    store.select_word(0)  # no change, no notification
    unsubscribe()
    store.select_word(1)

    assert [state.status for state in seen] == [LessonStatus.LOADING, LessonStatus.READY]


def test_out_of_order_completions_apply_last_completed():
    # Known non-guarantee: without stale-fetch discard, whichever response
    # lands last wins, even if it was issued first.
    store = _store()
    first_ticket = store.start_fetch()
    second_ticket = store.start_fetch()

    store.complete_fetch(_words("second"), topic="second", ticket=second_ticket)
    store.complete_fetch(_words("first"), topic="first", ticket=first_ticket)

    assert store.state.words[0].word == "first0"
    assert [lesson.topic for lesson in store.state.history] == ["first", "second"]


def test_stale_completion_is_discarded_when_enabled():
    logger = _Logger()
    store = _store(discard_stale_fetches=True, logger=logger)
    first_ticket = store.start_fetch()
    second_ticket = store.start_fetch()

    store.complete_fetch(_words("first"), topic="first", ticket=first_ticket)
    assert store.state.is_loading is True
    assert store.state.history == ()

    store.complete_fetch(_words("second"), topic="second", ticket=second_ticket)
    assert store.state.is_loading is False
    assert [lesson.topic for lesson in store.state.history] == ["second"]
    assert any("stale" in message for message in logger.infos)


def test_custom_history_limit():
    store = _store(history_limit=2)
    for index in range(3):
        store.start_fetch()
        store.complete_fetch(_words("a"), topic=str(index))

    assert [lesson.topic for lesson in store.state.history] == ["2", "1"]
