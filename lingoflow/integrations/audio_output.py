"""Audio output context backed by sounddevice."""

from __future__ import annotations

import numpy as np

from ..domain.pcm import AudioBuffer

try:
    import sounddevice as _sd
except Exception:  # pragma: no cover - dependency optional at import time
    _sd = None


class SoundDeviceOutput:
    """Long-lived output context bound to the default playback device."""

    def __init__(self, sample_rate: int, num_channels: int = 1, *, sd_module=None) -> None:
        self._sd = sd_module if sd_module is not None else _sd
        if self._sd is None:
            raise RuntimeError("sounddevice is not available")
        self.sample_rate = int(sample_rate)
        self.num_channels = int(num_channels)
        self._sd.check_output_settings(
            samplerate=self.sample_rate,
            channels=self.num_channels,
            dtype="float32",
        )

    def play(self, buffer: AudioBuffer) -> None:
        """Start one-shot playback of buffer without blocking."""
        if buffer.frame_count == 0:
            raise ValueError("Audio buffer is empty.")
        prepared = np.asarray(buffer.samples, dtype=np.float32)
        self._sd.play(prepared, samplerate=int(buffer.sample_rate), blocking=False)

    def stop(self) -> None:
        self._sd.stop()
