"""
Logging - File sink shared by the presenter and the entry point.
"""

import logging
import os
from typing import Union

LOGGER_NAME = "liri"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(log_file: Union[str, os.PathLike], level: int = logging.INFO) -> logging.Logger:
    """
    Attach an append-only file handler to the application logger.

    Calling this twice with the same path leaves a single handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    target = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return logger

    file_handler = logging.FileHandler(target, mode="a", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return logger
