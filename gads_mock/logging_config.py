"""
Centralized logging configuration for the mock data API.

Usage:
    from gads_mock.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Report generated")
    logger.warning("Unknown orderBy field")
    logger.error("Failure")

Defaults come from the environment (LOG_LEVEL, LOG_DIR). With no LOG_DIR set,
only the console handler is attached.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    module_name: str,
    log_level: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Set up logging for a module with optional file and console output.

    Args:
        module_name: Name of the module (use __name__)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); default LOG_LEVEL or INFO
        log_dir: Directory for log files; None disables the file handler
        console_output: Whether to output to console (stderr, stdout carries CLI output)

    Returns:
        Configured logger instance

    Log Levels:
        DEBUG: Structure generation details, per-request filters
        INFO: Reports generated, app startup
        WARNING: Unknown accounts, ignored sort fields
        ERROR: Unexpected failures

    Log Files:
        Format: {log_dir}/{module}_{date}.log
        Example: logs/report_2026-02-14.log
        Rotation: Daily (new file each day)
    """
    level_name = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    # Prevent duplicate handlers if setup_logging called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        today = datetime.now().strftime("%Y-%m-%d")
        simple_module = module_name.split('.')[-1]
        log_file = log_path / f"{simple_module}_{today}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Handlers are attached here, don't double-log through the root logger
    logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """
    Get an existing logger or create a new one with environment defaults.

    Args:
        module_name: Name of the module (use __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(module_name)

    if not logger.handlers:
        return setup_logging(module_name, log_dir=os.environ.get("LOG_DIR") or None)

    return logger
