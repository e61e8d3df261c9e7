"""Logging configuration for the app."""

from __future__ import annotations

import logging

from .config import AppConfig

LOGGER_NAME = "lingoflow_app"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
FILE_FORMAT = (
    "%(asctime)s | %(levelname)s | %(threadName)s | %(module)s:%(lineno)d | "
    "%(funcName)s | %(message)s"
)


def resolve_level(name: str, fallback: int = logging.INFO) -> int:
    """Map a level name such as ``"warning"`` to its number; unknown names fall back."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else fallback


def _replace_handlers(logger: logging.Logger, *handlers: logging.Handler) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(config: AppConfig) -> logging.Logger:
    """Configure the app logger: console at LOG_LEVEL, file at FILE_LOG_LEVEL.

    Worker threads log fetch and playback failures, so the file format
    records the thread name. Python warnings go to the file only.
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolve_level(config.log_level))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
    file_handler.setLevel(resolve_level(config.file_log_level, logging.DEBUG))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _replace_handlers(logger, console_handler, file_handler)

    logging.captureWarnings(True)
    warnings_logger = logging.getLogger("py.warnings")
    warnings_logger.setLevel(logging.DEBUG)
    warnings_logger.propagate = False
    _replace_handlers(warnings_logger, file_handler)
    return logger
