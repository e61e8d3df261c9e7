"""Exception types raised across LingoFlow layers."""
from __future__ import annotations


class LingoFlowError(RuntimeError):
    """Base error for the application."""


class ConfigError(LingoFlowError):
    """Raised when required startup configuration is missing."""


class GeminiError(LingoFlowError):
    """Raised when a Gemini request fails or returns an invalid payload."""


class PronunciationError(LingoFlowError):
    """Raised when a speech response carries no usable audio."""
