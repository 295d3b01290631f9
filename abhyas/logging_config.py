"""Centralized logging configuration for abhyas."""

import logging
import sys
from pathlib import Path

from .api.config.get_home_dir import get_home_dir
from .constants import DEFAULT_LOG_FILENAME

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
) -> None:
    """
    Configure logging for abhyas.

    The logfile receives everything at ``level`` and above; the terminal only
    sees errors so the interactive menu stays readable.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to log file (default <home>/abhyas.log)
    """
    if log_file is None:
        log_file = get_home_dir(DEFAULT_LOG_FILENAME)

    # Ensure log directory exists
    log_file.parent.mkdir(parents=True, exist_ok=True)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.ERROR)

    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            stream_handler,
        ],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"abhyas.{name}")
