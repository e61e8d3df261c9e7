import threading

from lingoflow.application.playback import PlaybackSession
from lingoflow.domain.language import Language
from lingoflow.errors import PronunciationError


class _Logger:
    def __init__(self):
        self.exceptions = []
        self.infos = []

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def debug(self, *_args):
        return None

    def exception(self, message, *args):
        self.exceptions.append(message % args if args else message)


class _Requester:
    def __init__(self, payload=b"\x00\x00\xff\x7f", error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def fetch_pronunciation(self, text, language):
        self.calls.append((text, language))
        if self.error is not None:
            raise self.error
        return self.payload


class _Output:
    def __init__(self, sample_rate, num_channels, fail=False):
        self.sample_rate = sample_rate
        self.num_channels = num_channels
        self.fail = fail
        self.played = []

    def play(self, buffer):
        if self.fail:
            raise RuntimeError("device rejected buffer")
        self.played.append(buffer)


class _OutputFactory:
    def __init__(self, fail=False):
        self.fail = fail
        self.created = []

    def __call__(self, sample_rate, num_channels):
        output = _Output(sample_rate, num_channels, fail=self.fail)
        self.created.append(output)
        return output


def test_output_is_created_lazily_and_reused():
    factory = _OutputFactory()
    session = PlaybackSession(_Requester(), factory, _Logger())

    assert factory.created == []
    assert session.output is None

    assert session.play("hello", Language.ENGLISH) is True
    assert session.play("world", Language.ENGLISH) is True

    assert len(factory.created) == 1
    output = factory.created[0]
    assert (output.sample_rate, output.num_channels) == (24000, 1)
    assert [buffer.frame_count for buffer in output.played] == [2, 2]
    assert output.played[0].sample_rate == 24000


def test_loading_flag_toggles_around_successful_play():
    seen = []
    session = PlaybackSession(_Requester(), _OutputFactory(), _Logger())
    session.subscribe(seen.append)

    session.play("hello", "en")

    assert seen == [True, False]
    assert session.is_audio_loading is False


def test_requester_failure_is_logged_and_clears_flag():
    logger = _Logger()
    requester = _Requester(error=PronunciationError("No audio data returned"))
    factory = _OutputFactory()
    session = PlaybackSession(requester, factory, logger)
    seen = []
    session.subscribe(seen.append)

    assert session.play("hello", Language.CHINESE) is False

    assert seen == [True, False]
    assert requester.calls == [("hello", Language.CHINESE)]
    assert factory.created[0].played == []
    assert logger.exceptions and "hello" in logger.exceptions[0]


def test_output_engine_rejection_is_caught():
    logger = _Logger()
    session = PlaybackSession(_Requester(), _OutputFactory(fail=True), logger)

    assert session.play("hello", "en") is False
    assert session.is_audio_loading is False
    assert logger.exceptions


def test_output_creation_failure_is_retried_on_next_play():
    logger = _Logger()
    attempts = []

    def _factory(sample_rate, num_channels):
        attempts.append(sample_rate)
        if len(attempts) == 1:
            raise RuntimeError("no output device")
        return _Output(sample_rate, num_channels)

    session = PlaybackSession(_Requester(), _factory, logger)

    assert session.play("hello", "en") is False
    assert session.play("hello", "en") is True
    assert len(attempts) == 2


def test_concurrent_plays_share_one_output():
    factory = _OutputFactory()
    session = PlaybackSession(_Requester(), factory, _Logger())
    threads = [threading.Thread(target=session.play, args=(f"w{i}", "en")) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(factory.created) == 1
    assert len(factory.created[0].played) == 8
    assert session.is_audio_loading is False
