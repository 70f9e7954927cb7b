"""Shared package logger."""
import logging
import os
import sys
from typing import Optional


LOGGER_NAME = "primitive_calculator"
LOG_LEVEL_ENV = "PRIMITIVE_CALCULATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    The level comes from the argument, then the environment variable
    PRIMITIVE_CALCULATOR_LOG_LEVEL, then defaults to WARNING.
    Calling it again only updates the level.

    :param str level: Logging level name (e.g. "DEBUG")

    :return: The configured package logger
    :rtype: logging.Logger
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()

    # Results go to stdout, so logs must stay on stderr
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level_name)
    return logger
