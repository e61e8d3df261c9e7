"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LESSON_MODEL,
    DEFAULT_TTS_MODEL,
    HISTORY_LIMIT,
    SAMPLE_RATE,
)
from .errors import ConfigError
from .utils import env_flag, parse_int_env, resolve_path


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    api_key: str
    base_url: str
    lesson_model: str
    tts_model: str
    timeout_seconds: int
    history_limit: int
    sample_rate: int
    default_language: str
    discard_stale_fetches: bool = False


def read_api_key() -> str:
    """Return the Gemini credential from the process environment."""
    api_key = (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY is not set; lesson and speech requests are unavailable.")
    return api_key


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    api_key = read_api_key()
    base_url = os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
    lesson_model = (
        os.getenv("LINGOFLOW_LESSON_MODEL", DEFAULT_LESSON_MODEL).strip()
        or DEFAULT_LESSON_MODEL
    )
    tts_model = os.getenv("LINGOFLOW_TTS_MODEL", DEFAULT_TTS_MODEL).strip() or DEFAULT_TTS_MODEL
    timeout_seconds = parse_int_env("GEMINI_TIMEOUT_SECONDS", 0, min_value=0, max_value=600)
    history_limit = parse_int_env("HISTORY_LIMIT", HISTORY_LIMIT, min_value=1, max_value=20)
    sample_rate = parse_int_env("AUDIO_SAMPLE_RATE", SAMPLE_RATE, min_value=8000, max_value=96000)
    default_language = os.getenv("DEFAULT_LANGUAGE", "en").strip().lower()
    if default_language not in ("en", "zh"):
        default_language = "en"
    discard_stale_fetches = env_flag("DISCARD_STALE_FETCHES", "0")
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        api_key=api_key,
        base_url=base_url,
        lesson_model=lesson_model,
        tts_model=tts_model,
        timeout_seconds=timeout_seconds,
        history_limit=history_limit,
        sample_rate=sample_rate,
        default_language=default_language,
        discard_stale_fetches=discard_stale_fetches,
    )
