"""Logging configuration for the Career Roadmap AI service."""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance (stdout handler, level from LOG_LEVEL unless given)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO) if level is None else level)
    elif level is not None:
        logger.setLevel(level)
    return logger
