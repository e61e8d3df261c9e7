"""Contract between the bootstrap and a desktop front end."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..application.session import LearningSession


class DesktopApp(Protocol):
    """A window driven by one learning session.

    The front end subscribes to the session's lesson store and playback
    flag, and hands the session a background runner for network work.
    """

    title: str
    session: "LearningSession"

    def launch(self) -> None:
        """Build the window if needed and block in its event loop."""

    def build_for_test(self) -> Any:
        """Build the window without entering the event loop."""
