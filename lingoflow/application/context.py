"""Runtime dependency container for the desktop application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import AppConfig
    from .bootstrap import AppServices


@dataclass
class AppContext:
    """Holds runtime dependencies assembled at startup."""

    config: "AppConfig"
    logger: Any
    skip_app_init: bool
    lesson_requester: Any = None
    pronunciation_requester: Any = None
    lesson_store: Any = None
    playback: Any = None
    session: Any = None
    app: Any = None

    def bind_services(self, services: "AppServices") -> None:
        self.lesson_requester = services.lesson_requester
        self.pronunciation_requester = services.pronunciation_requester
        self.lesson_store = services.lesson_store
        self.playback = services.playback
        self.session = services.session
        self.app = services.app
