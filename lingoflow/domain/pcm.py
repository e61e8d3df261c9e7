"""Decoding of raw 16-bit PCM payloads into float sample buffers."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..constants import NUM_CHANNELS, SAMPLE_RATE

INT16_SCALE = 32768.0


@dataclass(frozen=True)
class AudioBuffer:
    """Normalized float32 samples shaped (frames, channels)."""

    samples: np.ndarray
    sample_rate: int
    num_channels: int

    @property
    def frame_count(self) -> int:
        return int(self.samples.shape[0])

    @property
    def duration_seconds(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / float(self.sample_rate)

    def channel_data(self, channel: int) -> np.ndarray:
        return self.samples[:, channel]


def decode_pcm16(
    raw: bytes | bytearray | memoryview,
    sample_rate: int = SAMPLE_RATE,
    num_channels: int = NUM_CHANNELS,
) -> AudioBuffer:
    """Decode little-endian signed 16-bit PCM interleaved by channel.

    A trailing odd byte is dropped, and so are trailing samples that do not
    fill a whole frame. Neither case is an error.
    """
    if int(sample_rate) <= 0:
        raise ValueError("sample_rate must be positive.")
    if int(num_channels) < 1:
        raise ValueError("num_channels must be at least 1.")
    data = bytes(raw)
    sample_count = len(data) // 2
    frame_count = sample_count // num_channels
    usable = frame_count * num_channels
    pcm = np.frombuffer(data[: usable * 2], dtype="<i2")
    samples = pcm.reshape(frame_count, num_channels).astype(np.float32) / np.float32(INT16_SCALE)
    return AudioBuffer(
        samples=samples,
        sample_rate=int(sample_rate),
        num_channels=int(num_channels),
    )
