"""
Common utilities for kgdump.
"""

import logging
from pathlib import Path

from kgdump.config import get_config

from .types import Result

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_file: str | Path | None = None, level: int | str | None = None) -> logging.Logger:
    # Unset arguments come from the `log_file` and `log_level` config fields
    config = get_config()
    log_file = log_file or config.log_file
    level = level if level is not None else config.log_level

    # Handlers go on the package logger, the root logger is left to the application
    pkg_logger = logging.getLogger("kgdump")
    pkg_logger.setLevel(level)

    # Check if the package logger already has handlers (avoid adding multiple)
    if not pkg_logger.handlers:
        if log_file:
            handler: logging.Handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_logger.addHandler(handler)

    return pkg_logger


__all__ = ["Result", "setup_logging", "LOG_FORMAT"]
