"""Integrations for external services and libraries."""

from .audio_output import SoundDeviceOutput
from .gemini import (
    LESSON_RESPONSE_SCHEMA,
    GeminiSettings,
    extract_inline_audio,
    extract_response_text,
    generate_structured_text,
    synthesize_speech,
)

__all__ = [
    "GeminiSettings",
    "LESSON_RESPONSE_SCHEMA",
    "SoundDeviceOutput",
    "extract_inline_audio",
    "extract_response_text",
    "generate_structured_text",
    "synthesize_speech",
]
