"""
Logging setup for the application.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from music_service.core.config import Settings

LOGGER_NAME = "music_service"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Configure the application logger.

    Logs go to stdout and, when ``settings.log_file`` is set, to a rotating
    file as well.

    Args:
        settings: Application settings

    Returns:
        The configured ``music_service`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    # Reconfiguring replaces handlers installed by a previous app instance
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if settings.log_file:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
