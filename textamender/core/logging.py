"""Structured logging configuration for textamender."""

import logging
import sys

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
) -> None:
    """Configure logging for textamender.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("textamender")
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # stdout carries the amended text, so logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    logger.addHandler(handler)


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "pipe_name"):
            parts.append(f"pipe={record.pipe_name}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
