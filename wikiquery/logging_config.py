#!/usr/bin/env python3
"""
Logging configuration for wikiquery.

Sets up logging to the console and, when a log directory is known, to a
rotating file.

Usage:
    from wikiquery.logging_config import setup_logging

    logger = setup_logging(
        name="wikiquery",
        language="en",
        log_dir="./logs",  # Optional, defaults to LOG_DIR env var or no file
    )
    logger.info("Searching...")
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    name: str = "wikiquery",
    language: Optional[str] = None,
    log_dir: Optional[str] = None,
    level: int = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging to console and, optionally, file.

    Args:
        name: Logger name; client loggers ("wikiquery.<language>") are children
            of the default name and inherit its handlers
        language: Language edition for the log filename (e.g., "en")
        log_dir: Directory for log files (default: LOG_DIR env var; no file
            logging when neither is set)
        level: Logging level (default: INFO)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated log files to keep
        console: Whether to also log to stderr

    Returns:
        Configured logger instance

    Log files are named: {name}-{language}.log (e.g., wikiquery-en.log)
    """
    if log_dir is None:
        log_dir = get_log_dir()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers (for re-initialization)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / (f"{name}-{language}.log" if language else f"{name}.log")

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to {log_file}")

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_log_dir(default: Optional[str] = None) -> Optional[Path]:
    """
    Get the log directory from environment or default.

    Checks LOG_DIR environment variable first. Returns None when neither
    is set.
    """
    value = os.environ.get("LOG_DIR") or default
    return Path(value) if value else None
