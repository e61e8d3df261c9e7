"""Application layer orchestration."""

from .bootstrap import AppServices, build_gemini_settings, initialize_app_services
from .context import AppContext
from .lesson_service import LessonRequester, build_lesson_prompt
from .lesson_store import LessonState, LessonStatus, LessonStore
from .playback import PlaybackSession
from .ports import AudioOutputPort, LessonPort, PronunciationPort
from .pronunciation_service import PronunciationRequester
from .session import LearningSession

__all__ = [
    "AppContext",
    "AppServices",
    "AudioOutputPort",
    "LearningSession",
    "LessonPort",
    "LessonRequester",
    "LessonState",
    "LessonStatus",
    "LessonStore",
    "PlaybackSession",
    "PronunciationPort",
    "PronunciationRequester",
    "build_gemini_settings",
    "build_lesson_prompt",
    "initialize_app_services",
]
