import logging
import os
from typing import Optional, Union

LOGGER_NAME = "rateval"
LOG_LEVEL_ENV = "RATEVAL_LOG_LEVEL"


def _resolve_level(level: Optional[Union[int, str]]) -> Union[int, str]:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, logging.INFO)
    if isinstance(level, str):
        level = level.upper()
    return level


def get_logger(
    name=LOGGER_NAME,
    level=None,
    format_str="%(asctime)s [%(pathname)s:%(lineno)s - %(levelname)s ] %(message)s",
    date_format="%Y-%m-%d %H:%M:%S",
    file=False,
):
    """
    Get python logger instance.
    If ``level`` is omitted, ``RATEVAL_LOG_LEVEL`` environment variable is used, ``INFO`` by default.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.hasHandlers():
        handler = logging.StreamHandler() if not file else logging.FileHandler(name)
        handler.setLevel(level)
        formatter = logging.Formatter(fmt=format_str, datefmt=date_format)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def logger_with_settings(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Set up default logging"""
    logger = logging.getLogger(LOGGER_NAME)
    formatter = logging.Formatter(
        "%(asctime)s, %(name)s, %(levelname)s: %(message)s",
        datefmt="%d-%b-%y %H:%M:%S",
    )
    hdlr = logging.StreamHandler()
    hdlr.setFormatter(formatter)
    logger.addHandler(hdlr)
    logger.setLevel(_resolve_level(level))
    return logger
