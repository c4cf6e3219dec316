# -*- coding: utf-8 -*-
"""
GMTool Logging Module

Provides the standard logging configuration for the whole tool.
Log files are stored in ~/.gmtool/logs/.

Handlers are only configured on the root 'gmtool' logger.
Child loggers propagate to root and do not add handlers themselves.
"""

import logging
from pathlib import Path
from datetime import datetime

# Log directory
LOG_DIR = Path.home() / ".gmtool" / "logs"

# Log file name (dated)
LOG_FILE = LOG_DIR / f"gmtool_{datetime.now().strftime('%Y%m%d')}.log"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Flag to track if root logger is configured
_root_configured = False


def _create_file_handler():
    """Create the dated file handler, or None when the log directory is not writable."""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
    except OSError:
        return None
    file_handler.setLevel(logging.DEBUG)  # Everything goes to the file
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return file_handler


def _configure_root_logger():
    """Configure the root 'gmtool' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("gmtool")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)  # Only INFO and above on the console
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    file_handler = _create_file_handler()
    if file_handler is not None:
        root_logger.addHandler(file_handler)
    else:
        root_logger.warning(f"Log directory is not writable, file logging disabled: {LOG_DIR}")

    _root_configured = True


def set_console_level(level: int) -> None:
    """Change the level of the console handler (used by the CLI --verbose flag)."""
    _configure_root_logger()
    for handler in logging.getLogger("gmtool").handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


# Main application logger - configure root on module load
_configure_root_logger()
logger = logging.getLogger("gmtool")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root 'gmtool' logger.
    This prevents duplicate log lines.

    Args:
        name: Module name

    Returns:
        Logger named gmtool.{name}
    """
    # Ensure root is configured
    _configure_root_logger()

    return logging.getLogger(f"gmtool.{name}")
