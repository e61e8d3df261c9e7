"""Shared constants for lesson and audio handling."""

SAMPLE_RATE = 24000
NUM_CHANNELS = 1
LESSON_WORD_COUNT = 10
HISTORY_LIMIT = 5
DEFAULT_TOPIC_LABEL = "Tổng hợp"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_LESSON_MODEL = "gemini-3-flash-preview"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"
