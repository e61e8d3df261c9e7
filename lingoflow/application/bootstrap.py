"""Application bootstrap assembly for requesters, state, and UI services."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..integrations.audio_output import SoundDeviceOutput
from ..integrations.gemini import GeminiSettings
from ..ui.desktop_types import DesktopApp
from ..ui.tkinter_app import create_tkinter_app
from .lesson_service import LessonRequester
from .lesson_store import LessonStore
from .playback import PlaybackSession
from .pronunciation_service import PronunciationRequester
from .session import LearningSession


@dataclass(frozen=True)
class AppServices:
    lesson_requester: LessonRequester
    pronunciation_requester: PronunciationRequester
    lesson_store: LessonStore
    playback: PlaybackSession
    session: LearningSession
    app: DesktopApp


def build_gemini_settings(config: AppConfig) -> GeminiSettings:
    return GeminiSettings(
        api_key=config.api_key,
        base_url=config.base_url,
        lesson_model=config.lesson_model,
        tts_model=config.tts_model,
        timeout_seconds=config.timeout_seconds,
    )


def initialize_app_services(
    *,
    config: AppConfig,
    logger,
    output_factory=None,
    desktop_factory=None,
) -> AppServices:
    """Construct all runtime services and return a typed service bundle."""
    settings = build_gemini_settings(config)
    logger.info(
        "Gemini models: lesson=%s tts=%s timeout=%s",
        settings.lesson_model,
        settings.tts_model,
        settings.timeout_seconds or "none",
    )
    lesson_requester = LessonRequester(settings, logger)
    pronunciation_requester = PronunciationRequester(settings, logger)
    lesson_store = LessonStore(
        history_limit=config.history_limit,
        discard_stale_fetches=config.discard_stale_fetches,
        logger=logger,
    )
    playback = PlaybackSession(
        pronunciation_requester,
        output_factory or SoundDeviceOutput,
        logger,
        sample_rate=config.sample_rate,
    )
    session = LearningSession(
        lesson_store,
        lesson_requester,
        playback,
        logger,
        language=config.default_language,
    )
    app = (desktop_factory or create_tkinter_app)(
        config=config,
        logger=logger,
        session=session,
    )
    return AppServices(
        lesson_requester=lesson_requester,
        pronunciation_requester=pronunciation_requester,
        lesson_store=lesson_store,
        playback=playback,
        session=session,
        app=app,
    )
