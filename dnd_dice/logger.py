"""
Logger factory for the dice roller.

Every module asks for ``get_logger(__name__)``; one stream handler lives on
the ``dnd_dice`` package logger and child loggers propagate to it.
"""

import logging
import sys

from dnd_dice import config

PACKAGE_LOGGER = "dnd_dice"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logger(name: str = PACKAGE_LOGGER, log_level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)

    # guard against stacking handlers on re-import
    if logger.handlers:
        return logger

    logger.setLevel(log_level)
    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger


def get_logger(module_name: str, log_level: str = config.LOG_LEVEL) -> logging.Logger:
    if config.DEBUG and log_level.upper() == "INFO":
        log_level = "DEBUG"

    actual_level = LEVEL_MAP.get(log_level.upper(), logging.INFO)

    setup_logger(PACKAGE_LOGGER, LEVEL_MAP.get(config.LOG_LEVEL.upper(), logging.INFO))
    if module_name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)

    logger = logging.getLogger(module_name)
    logger.setLevel(actual_level)
    return logger
