"""On-demand pronunciation playback through a shared output context."""

from __future__ import annotations

import threading
from typing import Callable

from ..constants import NUM_CHANNELS, SAMPLE_RATE
from ..domain.language import Language
from ..domain.pcm import decode_pcm16
from .ports import AudioOutputPort, PronunciationPort

OutputFactory = Callable[[int, int], AudioOutputPort]
FlagListener = Callable[[bool], None]


class PlaybackSession:
    """Fetches, decodes, and plays one pronunciation per request.

    Requests are not serialized; is_audio_loading reflects whichever
    request resolved last.
    """

    def __init__(
        self,
        requester: PronunciationPort,
        output_factory: OutputFactory,
        logger,
        *,
        sample_rate: int = SAMPLE_RATE,
        num_channels: int = NUM_CHANNELS,
    ) -> None:
        self.requester = requester
        self.output_factory = output_factory
        self.logger = logger
        self.sample_rate = int(sample_rate)
        self.num_channels = int(num_channels)
        self.is_audio_loading = False
        self._output: AudioOutputPort | None = None
        self._output_lock = threading.Lock()
        self._listeners: list[FlagListener] = []

    @property
    def output(self) -> AudioOutputPort | None:
        return self._output

    def subscribe(self, listener: FlagListener) -> None:
        self._listeners.append(listener)

    def _set_loading(self, value: bool) -> None:
        self.is_audio_loading = bool(value)
        for listener in list(self._listeners):
            listener(self.is_audio_loading)

    def _ensure_output(self) -> AudioOutputPort:
        with self._output_lock:
            if self._output is None:
                self.logger.info(
                    "Opening audio output: sample_rate=%s channels=%s",
                    self.sample_rate,
                    self.num_channels,
                )
                self._output = self.output_factory(self.sample_rate, self.num_channels)
            return self._output

    def play(self, word: str, language: Language | str) -> bool:
        """Play the pronunciation of word; return False when nothing was played."""
        self._set_loading(True)
        try:
            output = self._ensure_output()
            raw = self.requester.fetch_pronunciation(word, language)
            buffer = decode_pcm16(raw, self.sample_rate, self.num_channels)
            output.play(buffer)
            self.logger.debug(
                "Playing pronunciation: word=%r frames=%s", word, buffer.frame_count
            )
            return True
        except Exception:
            self.logger.exception("Audio playback failed: word=%r", word)
            return False
        finally:
            self._set_loading(False)
