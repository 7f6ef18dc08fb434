"""Centralized logging configuration for the command line.

Provides:
- a console handler on stderr at the configured level, so prompts on
  stdout stay readable
- an optional detailed log file (``log_file`` setting)
"""

import logging
import sys

from env_creator.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure application logging with console and file handlers.

    Args:
        settings: Settings to read levels and paths from. Uses the global
            settings when None.

    Returns:
        The configured root logger.
    """
    settings = settings or get_settings()
    settings.configure_logging()

    level = getattr(logging, settings.log_level, logging.WARNING)

    # Create formatters
    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    simple_formatter = logging.Formatter(
        fmt="%(levelname)-8s | %(message)s",
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if settings.log_file else level)

    # Clear existing handlers
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # File handler for DEBUG and above
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    return root_logger
