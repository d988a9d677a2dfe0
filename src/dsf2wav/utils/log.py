"""Logging configuration."""

import logging
import os
from typing import Dict

LOG_LEVEL_ENV = "DSF2WAV_LOG_LEVEL"

_loggers: Dict[str, logging.Logger] = {}


def _default_level() -> int:
    """Resolve the log level from the environment (default: WARNING)."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    if not isinstance(level, int):
        return logging.WARNING
    return level


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger for the given name."""
    if name not in _loggers:
        logger = logging.getLogger(name)
        logger.setLevel(_default_level())
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            logger.addHandler(handler)
        _loggers[name] = logger
    return _loggers[name]
