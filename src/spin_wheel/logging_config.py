"""
Log output for the spin_wheel namespace.

The console gets a compact ``LEVEL name: message`` line in normal use and a
timestamped one under ``--debug``. A log file, when requested, always uses
the detailed layout so spin sessions can be replayed from it.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "spin_wheel"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the "spin_wheel" logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Threshold for the logger and its handlers.
        log_file: Optional path; the file is appended to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    debug = level <= logging.DEBUG
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    if debug:
        console.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt="%H:%M:%S"))
    else:
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("Logging to console%s", f" and {log_file}" if log_file else "")
    return logger
