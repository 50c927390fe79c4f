"""
Unified Logging Configuration

Provides consistent logging setup across the pipelines.
Console output goes to stderr: stdout is reserved for the per-page progress
lines the pipelines print.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = Path("logs")

# Environment variable names
ENV_LOG_LEVEL = "WIKIDIV_LOG_LEVEL"
ENV_LOG_FORMAT = "WIKIDIV_LOG_FORMAT"
ENV_LOG_DIR = "WIKIDIV_LOG_DIR"


def setup_logging(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    console: bool = True,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging with a consistent format.

    Args:
        name: Logger name (usually the package name, so module loggers inherit it)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Defaults to WIKIDIV_LOG_LEVEL env var or INFO
        log_file: Optional log file name (created in log_dir)
        log_dir: Directory for log files
                Defaults to WIKIDIV_LOG_DIR env var or "./logs"
        console: Whether to output to the console (stderr)
        format_string: Custom format string

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logging("wikidivisions")
        >>> logger = setup_logging("wikidivisions", level="DEBUG", log_file="run.log")
    """
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    if format_string is None:
        format_string = os.getenv(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT)

    if log_dir is None:
        log_dir_str = os.getenv(ENV_LOG_DIR)
        log_dir = Path(log_dir_str) if log_dir_str else DEFAULT_LOG_DIR

    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(format_string, datefmt=DEFAULT_DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)
        logger.addHandler(console_handler)

    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(numeric_level)
        logger.addHandler(file_handler)

    return logger
