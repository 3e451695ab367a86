"""
Logging configuration for the COBOL case folder.

Output data goes to stdout, so every handler installed here writes to
stderr or to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

LOGGER_NAME = "cobol_casefold"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Configure logging for the case folder.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        verbose: If True, use detailed format; otherwise use simple format

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Clear any existing handlers
    logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(log_level)

    log_format = DEFAULT_FORMAT if verbose else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Optional name for the logger. If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
