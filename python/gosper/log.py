import logging
import os

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> logging.Logger:
    """Attach a stderr handler to the root logger at the ``LOG_LEVEL`` level.

    Library modules only call ``logging.getLogger(__name__)``; entry points
    call this once so those records reach the console.
    """

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(level)

    if logger.handlers:
        # Logging already configured elsewhere; respect existing handlers.
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
