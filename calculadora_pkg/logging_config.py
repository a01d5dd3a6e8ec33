"""Structured logging configuration for Calculadora."""

import logging
import sys
from datetime import datetime
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message.

    Records logged with ``extra={"error_code": ...}`` (failed evaluations)
    get the code in brackets after the logger name.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        source = record.name
        error_code = getattr(record, "error_code", None)
        if error_code:
            source = f"{source} [{error_code}]"
        message = f"{timestamp} [{record.levelname}] {source}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs (if None, logs to stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("calculadora")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "calculadora") -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"calculadora.{name}")
