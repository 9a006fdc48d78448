"""
Logging configuration for the device monitor.

Every module logs to stdout through setup_logger(__name__); startup, the log
directory and each new metrics file are announced at INFO, written samples
at DEBUG.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "device_monitor"

_package_level = logging.INFO


def setup_logger(
    name: str,
    level: Optional[int] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: the package level, INFO unless set_level() changed it)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = _package_level

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Re-running setup must not stack handlers
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console)

    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """
    Switch the console level of every device_monitor logger.

    Loggers set up afterwards pick the new level up as their default.
    """
    global _package_level
    _package_level = level

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
