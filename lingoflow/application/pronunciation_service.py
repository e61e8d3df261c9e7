"""Pronunciation audio requests against the speech synthesis service."""

from __future__ import annotations

import base64
import binascii

from ..domain.language import Language, voice_for_language
from ..errors import PronunciationError
from ..integrations.gemini import GeminiSettings, extract_inline_audio, synthesize_speech


class PronunciationRequester:
    def __init__(self, settings: GeminiSettings, logger) -> None:
        self.settings = settings
        self.logger = logger

    def fetch_pronunciation(self, text: str, language: Language | str) -> bytes:
        """Return raw PCM bytes for text; GeminiError and PronunciationError propagate."""
        word = (text or "").strip()
        if not word:
            raise PronunciationError("Pronunciation text is empty.")
        voice_name = voice_for_language(language)
        self.logger.debug("Requesting pronunciation: text=%r voice=%s", word, voice_name)
        response = synthesize_speech(self.settings, word, voice_name)
        encoded = extract_inline_audio(response)
        if encoded is None:
            raise PronunciationError("No audio data returned")
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise PronunciationError("Audio payload is not valid base64.") from exc
