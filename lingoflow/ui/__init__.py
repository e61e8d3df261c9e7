"""User interface layer."""

from .common import (
    APP_TITLE,
    format_history_date,
    history_card_text,
    word_counter_text,
    word_font_family,
)
from .desktop_types import DesktopApp
from .tkinter_app import create_tkinter_app

__all__ = [
    "APP_TITLE",
    "DesktopApp",
    "create_tkinter_app",
    "format_history_date",
    "history_card_text",
    "word_counter_text",
    "word_font_family",
]
