"""Logging handlers for console and file output."""

import logging
import logging.handlers
import sys
from pathlib import Path

from .formatters import get_formatter


class ColoredConsoleHandler(logging.StreamHandler):
    """Console handler that colors the level name on TTYs."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, stream=None):
        super().__init__(stream or sys.stdout)
        self.use_colors = hasattr(self.stream, "isatty") and self.stream.isatty() and sys.platform != "win32"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors and record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)

        return formatted


class RotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file handler that creates the log directory on demand."""

    def __init__(self, filename: str, max_bytes: int = 10485760, backup_count: int = 5, encoding: str = "utf-8"):
        Path(filename).parent.mkdir(parents=True, exist_ok=True)

        super().__init__(filename=filename, maxBytes=max_bytes, backupCount=backup_count, encoding=encoding)


def create_console_handler(
    format_type: str = "detailed", level: int = logging.INFO, use_colors: bool = True
) -> logging.Handler:
    """Create a console handler writing to stdout.

    Args:
        format_type: Type of formatter to use
        level: Minimum log level for this handler
        use_colors: Whether to color level names (TTY only)
    """
    handler: logging.Handler
    if use_colors:
        handler = ColoredConsoleHandler()
    else:
        handler = logging.StreamHandler(sys.stdout)

    handler.setLevel(level)
    handler.setFormatter(get_formatter(format_type))

    return handler


def create_file_handler(
    filepath: str, format_type: str = "structured", level: int = logging.DEBUG, max_bytes: int = 10485760, backup_count: int = 5
) -> logging.Handler:
    """Create a rotating file handler.

    Args:
        filepath: Path to the log file
        format_type: Type of formatter to use
        level: Minimum log level for this handler
        max_bytes: Maximum size before rotation (default 10MB)
        backup_count: Number of backup files to keep
    """
    handler = RotatingFileHandler(filename=filepath, max_bytes=max_bytes, backup_count=backup_count)

    handler.setLevel(level)
    handler.setFormatter(get_formatter(format_type))

    return handler


def create_null_handler() -> logging.Handler:
    """Create a handler that discards all records, for test runs."""
    return logging.NullHandler()
