"""
Logging configuration for tptweak.

The root logger gets the app-wide handlers. The "tptweak" logger can be
given its own level, so read misses and type mismatches (logged at
DEBUG by the store) can be turned on without making the host app chatty.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

TWEAK_LOGGER = "tptweak"


def _parse_level(level: str, default: int = logging.INFO) -> int:
    return getattr(logging, str(level).upper(), default)


def set_tweak_log_level(level: Optional[str]) -> logging.Logger:
    """
    Set the level of the "tptweak" logger namespace.

    Args:
        level: Level name, or None to inherit from the root logger

    Returns:
        The "tptweak" logger
    """
    tweak_logger = logging.getLogger(TWEAK_LOGGER)
    tweak_logger.setLevel(logging.NOTSET if level is None else _parse_level(level))
    return tweak_logger


def setup_logging(
    log_level: str = "INFO",
    log_file: bool = True,
    tweak_level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for an app embedding tptweak.

    Args:
        log_level: Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to a timestamped file
        tweak_level: Level for tptweak's own loggers, None to follow log_level

    Returns:
        Root logger instance
    """
    logger = logging.getLogger()
    logger.setLevel(_parse_level(log_level))

    logger.handlers.clear()

    # Console stays at INFO; store DEBUG records only reach the file
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    set_tweak_log_level(tweak_level)

    if log_file:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file_path = log_dir / f"tptweak_{datetime.now():%Y%m%d_%H%M%S}.log"

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file_path}")

    return logger


def get_log_dir() -> Path:
    """Platform-specific directory for tptweak log files."""
    if os.name == 'nt':
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))

    return Path(base) / 'tptweak' / 'logs'
