"""Logging configuration for applications embedding the client.

The library itself only creates module loggers; it never configures
handlers on import.
"""

import logging
import sys
from enum import Enum


class LogLevel(Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(
    level: str | LogLevel = LogLevel.INFO,
    format_string: str | None = None,
    include_timestamp: bool = True,
    trace_requests: bool = False,
) -> logging.Logger:
    """Configure logging for an application using the client.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL) as string or LogLevel enum
        format_string: Custom format string (optional)
        include_timestamp: Whether to include timestamps in logs
        trace_requests: Keep opensearch-py's per-request ``opensearch`` logger at
            the requested level instead of WARNING

    Returns:
        The ``esclient`` package logger

    """
    level_str = level.value if isinstance(level, LogLevel) else level.upper()
    numeric_level = getattr(logging, level_str, logging.INFO)

    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"
        else:
            format_string = "%(name)s  %(levelname)s  %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # The connection logs every request at INFO, which drowns out our own output
    if not trace_requests:
        logging.getLogger("opensearch").setLevel(max(numeric_level, logging.WARNING))

    return logging.getLogger("esclient")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    """
    return logging.getLogger(name)
