"""
Logging utilities for structured logging with ISO 8601 timestamps.
"""

import json
import logging
from datetime import datetime, timezone
from typing import IO, Optional

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset([
    'args', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'levelname', 'levelno',
    'pathname', 'filename', 'module', 'name', 'thread', 'threadName',
    'processName', 'process', 'message', 'msg', 'taskName',
])


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that formats logs as JSON with ISO 8601 timestamps.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        iso_time = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()

        log_data = {
            'timestamp': iso_time,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith('_'):
                continue
            log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Set up and configure a logger with the structured formatter.

    The console is left alone unless ``stream`` is given, because stdout
    carries the link report and stderr is reserved for errors.

    Args:
        name: Name of the logger
        log_file: Path to the log file (optional)
        level: Log level
        stream: Stream to mirror log lines to (optional)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    _clear_handlers(logger)
    logger.setLevel(level)
    logger.propagate = False

    formatter = StructuredFormatter()

    if stream is not None:
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def reset_logger(name: str) -> logging.Logger:
    """
    Detach and close every handler of a logger, leaving it silent.

    Streams passed to ``setup_logger`` are not closed, only their handlers.

    Args:
        name: Name of the logger

    Returns:
        The logger, with only a NullHandler attached
    """
    logger = logging.getLogger(name)
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    return logger
