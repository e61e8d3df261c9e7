"""Desktop entrypoint for LingoFlow."""

from __future__ import annotations

from lingoflow.application.bootstrap import initialize_app_services
from lingoflow.application.context import AppContext
from lingoflow.config import load_config
from lingoflow.logging_config import setup_logging
from lingoflow.utils import env_flag

CONFIG = load_config()
logger = setup_logging(CONFIG)

SKIP_APP_INIT = env_flag("LINGOFLOW_SKIP_APP_INIT")

logger.info("Starting app")
logger.info("Log file: %s", CONFIG.log_file)
logger.debug(
    "Config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s GEMINI_BASE_URL=%s "
    "LESSON_MODEL=%s TTS_MODEL=%s TIMEOUT_SECONDS=%s HISTORY_LIMIT=%s "
    "SAMPLE_RATE=%s DEFAULT_LANGUAGE=%s DISCARD_STALE_FETCHES=%s",
    CONFIG.log_level,
    CONFIG.file_log_level,
    CONFIG.log_dir,
    CONFIG.base_url,
    CONFIG.lesson_model,
    CONFIG.tts_model,
    CONFIG.timeout_seconds,
    CONFIG.history_limit,
    CONFIG.sample_rate,
    CONFIG.default_language,
    CONFIG.discard_stale_fetches,
)

APP_CONTEXT = AppContext(
    config=CONFIG,
    logger=logger,
    skip_app_init=SKIP_APP_INIT,
)
if not SKIP_APP_INIT:
    APP_CONTEXT.bind_services(initialize_app_services(config=CONFIG, logger=logger))

app = APP_CONTEXT.app


def launch() -> None:
    if SKIP_APP_INIT:
        logger.info("LINGOFLOW_SKIP_APP_INIT enabled; launch skipped")
        return
    desktop_app = app
    if desktop_app is None:
        raise RuntimeError("Desktop app is not initialized.")
    logger.info("Launching desktop app")
    desktop_app.launch()


if __name__ == "__main__":
    launch()
