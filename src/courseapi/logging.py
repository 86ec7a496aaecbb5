"""Centralized logging configuration for the course registration service.

Provides rotating file logs with consistent formatting across all components.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "courseapi.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging with rotating file handler.

    Logs go to courseapi.log, rotated at 10MB with 5 backups kept.

    Args:
        log_dir: Directory for log files. Defaults to 'logs' in current directory.
                 Can be overridden with COURSEAPI_LOG_DIR environment variable.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with COURSEAPI_LOG_LEVEL environment variable.
        console: Whether to also log to console. Defaults to True.

    Returns:
        The root courseapi logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("COURSEAPI_LOG_DIR", DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("COURSEAPI_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("courseapi")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = log_dir / DEFAULT_LOG_FILE
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=DEFAULT_MAX_BYTES,
        backupCount=DEFAULT_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("courseapi logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'store', 'api').
              Will be prefixed with 'courseapi.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("courseapi."):
        name = f"courseapi.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Remove credentials from text before it is logged.

    Args:
        text: Text that may contain a database URL or other secrets.

    Returns:
        Sanitized text safe for logging.
    """
    patterns = [
        (r"(://[^:/@\s]+):[^@/\s]+@", r"\1:[REDACTED]@"),  # user:password@host
        (r"password=[^&\s]+", "password=[REDACTED]"),  # Query param passwords
    ]

    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)

    return result
