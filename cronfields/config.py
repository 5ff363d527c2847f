"""Configuration for cronfields."""

import logging
import os

NAME_COLUMN_WIDTH = 15
LOG_LEVEL_ENV = "CRONFIELDS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
