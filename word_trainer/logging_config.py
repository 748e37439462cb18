"""Logging setup for the word trainer.

Every module logs through a child of the ``word_trainer`` logger, so handlers
are only ever attached to that one parent.
"""

import logging
import sys
from pathlib import Path

from .config.settings import LoggingSettings

ROOT_LOGGER_NAME = "word_trainer"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONCISE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _detailed_formatter() -> logging.Formatter:
    return logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO", log_file: str | Path | None = None
) -> logging.Logger:
    """Attach a stdout handler (and optionally a file handler) to the trainer logger.

    Calling this again replaces the handlers from the previous call. Console
    output is concise unless ``level`` is DEBUG; the log file always gets the
    detailed format.
    """
    level_name = level.upper()
    trainer_logger = logging.getLogger(ROOT_LOGGER_NAME)
    trainer_logger.setLevel(level_name)

    for old_handler in trainer_logger.handlers[:]:
        trainer_logger.removeHandler(old_handler)
        old_handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        _detailed_formatter()
        if level_name == "DEBUG"
        else logging.Formatter(fmt=CONCISE_FORMAT)
    )
    trainer_logger.addHandler(console)

    if log_file:
        to_file = logging.FileHandler(log_file, encoding="utf-8")
        to_file.setFormatter(_detailed_formatter())
        trainer_logger.addHandler(to_file)

    return trainer_logger


def configure_logging(logging_settings: LoggingSettings) -> logging.Logger:
    """Apply ``LOG_LEVEL`` / ``LOG_FILE`` from settings"""
    return setup_logging(logging_settings.level, logging_settings.file)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
