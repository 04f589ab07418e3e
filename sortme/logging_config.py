"""
Logging configuration for sortme.

Logs go to stderr so terminal animation on stdout stays intact.

Environment Variables:
    SORTME_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    SORTME_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from sortme.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, run_id="quick-3fa2c1")
    logger.info("Built log")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


class RunIDFilter(logging.Filter):
    """
    Logging filter that adds run_id to all log records.

    Ensures all records have a run_id field, even if not logged via get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = "N/A"  # type: ignore
        return True


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logger.

    Arguments override the environment variables:
    - SORTME_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - SORTME_LOG_FORMAT: json, text (default: text)
    """
    log_level = (level or os.getenv("SORTME_LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.getenv("SORTME_LOG_FORMAT", "text")).lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    resolved = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(RunIDFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(run_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [run_id=%(run_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional run_id for correlation.

    Args:
        name: Logger name (typically __name__)
        run_id: Identifies one built log (algorithm plus digest prefix)

    Returns:
        LoggerAdapter with run_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"run_id": run_id or "N/A"})
