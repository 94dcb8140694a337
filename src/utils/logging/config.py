"""
Logging setup for table inspection.

Console records go to stderr so that reports written to stdout stay
machine-readable. An optional rotating log file receives the same records.
"""

import logging
import logging.handlers
import os
import sys

from .formatters import ConsoleFormatter, JSONFormatter

FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that flood DEBUG output when tracing is exported
NOISY_LOGGERS = ("grpc", "opentelemetry", "urllib3")


def _file_handler(path: str, max_bytes: int, backup_count: int) -> logging.Handler:
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    console_output: bool = True,
    json_format: bool = False,
    app_name: str = "table-inspection",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Configure the root logger, replacing any handlers already installed

    Args:
        level: Level name; unknown names fall back to INFO
        log_file: Rotating log file path (default: no file logging)
        console_output: Log to stderr
        json_format: Emit JSON records on every handler
        app_name: Value of the ``app`` field in JSON records
        max_bytes: Log file size that triggers rotation
        backup_count: Rotated log files to keep
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = []
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            JSONFormatter(app_name=app_name) if json_format else ConsoleFormatter(use_colors=True)
        )
        handlers.append(console_handler)

    if log_file:
        file_handler = _file_handler(log_file, max_bytes, backup_count)
        file_handler.setFormatter(
            JSONFormatter(app_name=app_name)
            if json_format
            else logging.Formatter(fmt=FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT)
        )
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging initialized: level={logging.getLevelName(numeric_level)}, "
        f"file={log_file or 'none'}, json={json_format}"
    )
