"""Logging setup for LogSweep."""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Set up logging for LogSweep.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        use_colors: Whether to use rich colored output on the console

    Returns:
        Root logger for logsweep
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if use_colors:
        handler: logging.Handler = RichHandler(
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        formatter = logging.Formatter("%(message)s")
    else:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)

    logger = logging.getLogger("logsweep")
    logger.setLevel(numeric_level)
    for existing in list(logger.handlers):
        existing.close()
    logger.handlers.clear()
    logger.addHandler(handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        file_handler.setLevel(numeric_level)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (will be prefixed with 'logsweep.')

    Returns:
        Logger instance
    """
    if not name.startswith("logsweep"):
        name = f"logsweep.{name}"
    return logging.getLogger(name)
