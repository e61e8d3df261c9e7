from lingoflow.application.lesson_store import LessonStatus, LessonStore
from lingoflow.application.session import LearningSession
from lingoflow.domain.language import Language
from lingoflow.domain.vocabulary import VocabularyWord


class _Logger:
    def __init__(self):
        self.infos = []
        self.exceptions = []

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def exception(self, message, *args):
        self.exceptions.append(message % args if args else message)


def _words(count=10):
    return [
        VocabularyWord(
            word=f"w{index}",
            phonetic="",
            meaning="",
            part_of_speech="",
            example="",
            example_translation="",
        )
        for index in range(count)
    ]


class _LessonRequester:
    def __init__(self, result=None, error=None):
        self.result = _words() if result is None else result
        self.error = error
        self.calls = []

    def fetch_lesson(self, language, topic=None):
        self.calls.append((language, topic))
        if self.error is not None:
            raise self.error
        return list(self.result)


class _Playback:
    def __init__(self):
        self.calls = []

    def play(self, word, language):
        self.calls.append((word, language))
        return True


class _DeferredRunner:
    def __init__(self):
        self.pending = []

    def __call__(self, work, on_done):
        self.pending.append((work, on_done))

    def finish(self, index):
        work, on_done = self.pending[index]
        on_done(work())


def _session(requester=None, runner=None):
    return LearningSession(
        LessonStore(),
        requester or _LessonRequester(),
        _Playback(),
        _Logger(),
        run_in_background=runner,
    )


def test_start_requests_initial_lesson_without_topic():
    requester = _LessonRequester()
    session = _session(requester)

    session.start()

    assert requester.calls == [(Language.ENGLISH, None)]
    assert session.store.state.status is LessonStatus.READY
    assert session.store.state.history[0].topic == "Tổng hợp"


def test_request_lesson_passes_topic_and_labels_history():
    requester = _LessonRequester()
    session = _session(requester)

    session.request_lesson("  Travel ")

    assert requester.calls == [(Language.ENGLISH, "Travel")]
    assert session.store.state.history[0].topic == "Travel"


def test_loading_is_visible_until_background_work_finishes():
    runner = _DeferredRunner()
    session = _session(runner=runner)

    session.request_lesson()
    assert session.store.state.status is LessonStatus.LOADING

    runner.finish(0)
    assert session.store.state.status is LessonStatus.READY


def test_failed_fetch_clears_loading_without_history():
    requester = _LessonRequester(error=RuntimeError("boom"))
    session = _session(requester)

    session.request_lesson()

    assert session.store.state.status is LessonStatus.EMPTY
    assert session.store.state.history == ()
    assert session.logger.exceptions == ["Lesson fetch crashed"]


def test_empty_result_leaves_state_unchanged():
    requester = _LessonRequester()
    session = _session(requester)
    session.start()
    before = session.store.state

    requester.result = []
    session.request_lesson("Food")

    assert session.store.state.words == before.words
    assert session.store.state.history == before.history
    assert session.store.state.is_loading is False


def test_set_language_refetches_only_on_change():
    requester = _LessonRequester()
    session = _session(requester)

    assert session.set_language("en") is False
    assert session.set_language(Language.CHINESE) is True

    assert requester.calls == [(Language.CHINESE, None)]
    assert session.language is Language.CHINESE


def test_language_is_captured_when_the_request_starts():
    runner = _DeferredRunner()
    requester = _LessonRequester()
    session = _session(requester, runner)

    session.request_lesson()
    session.language = Language.CHINESE
    runner.finish(0)

    assert requester.calls == [(Language.ENGLISH, None)]


def test_play_selected_uses_current_word_and_language():
    session = _session()
    assert session.play_selected() is False

    session.start()
    session.store.select_word(3)
    session.language = Language.CHINESE

    assert session.play_selected() is True
    assert session.playback.calls == [("w3", Language.CHINESE)]


def test_play_selected_is_refused_while_a_lesson_loads():
    runner = _DeferredRunner()
    session = _session(runner=runner)
    session.request_lesson()
    runner.finish(0)

    session.request_lesson("Food")

    assert session.store.state.current_word is not None
    assert session.play_selected() is False
    assert session.playback.calls == []
    assert len(runner.pending) == 2

    runner.finish(1)
    assert session.play_selected() is True
    assert len(runner.pending) == 3
