"""Logging utilities for the insights pipeline."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(
    name: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """Get a configured logger instance.

    Args:
        name: Logger name (defaults to the package logger)
        level: Logging level, as a number or a name like "DEBUG"

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name or "assessment_insights")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
