"""
Structured logging configuration for table inspection

Provides JSON-formatted or colored console logging with contextual
information attached through ``extra``.

Usage:
    import logging
    from utils.logging import ContextLogger, setup_logging

    # Setup logging (call once at application startup)
    setup_logging(level="INFO", json_format=True, log_file="logs/inspect.log")

    logger = logging.getLogger(__name__)
    logger.info("Analyzed rows", extra={"row_count": 250, "duplicate_groups": 3})

    # Or carry context on every record
    log = ContextLogger(__name__, command="diff")
    log.info("Compared rows", row_count=250)
"""

from .config import setup_logging
from .formatters import ConsoleFormatter, JSONFormatter
from .handlers import ContextLogger

__all__ = [
    "setup_logging",
    "JSONFormatter",
    "ConsoleFormatter",
    "ContextLogger",
]
