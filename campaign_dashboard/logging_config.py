"""
Centralized logging configuration for the campaign dashboard.

Usage:
    from campaign_dashboard.logging_config import setup_logging

    logger = setup_logging(__name__)
    logger.info("Fetched 12 campaigns")
    logger.error("Campaign API unreachable")
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    module_name: str,
    log_level: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Set up logging for a module with both file and console output.

    Args:
        module_name: Name of the module (use __name__)
        log_level: DEBUG, INFO, WARNING, ERROR (default: $LOG_LEVEL or INFO)
        log_dir: Directory for log files (default: $LOG_DIR or logs/)
        console_output: Whether to output to console (default: True)

    Returns:
        Configured logger instance

    Log Levels:
        INFO: Normal operations (fetches, page renders)
        WARNING: Potential issues (invalid display config, empty payloads)
        ERROR: Failures (campaign API errors, malformed payloads)

    Log Files:
        Format: logs/{module}_{date}.log
        Example: logs/api_client_2026-10-19.log
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(module_name)
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Prevent duplicate handlers if setup_logging called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    today = datetime.now().strftime("%Y-%m-%d")
    simple_module = module_name.split('.')[-1]
    log_file = log_path / f"{simple_module}_{today}.log"

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
