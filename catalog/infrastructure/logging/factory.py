"""Logger factory with lazy, settings-driven configuration.

This module provides the interface for obtaining loggers throughout the
catalog. The first call configures the root logger from the application
settings; later calls only hand out loggers.
"""

import inspect
import logging
from threading import Lock
from typing import Optional, Union

from ..config.settings import get_settings
from .config import get_configured_logger, setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


def get_logger(name: Optional[str] = None, **extra_context) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a properly configured logger.

    Args:
        name: Logger name. If None, detected from the calling module.
        **extra_context: Context included in every record of the returned logger.

    Returns:
        Configured logger, wrapped in a LoggerAdapter when context is given.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.info("Author created", extra={"author_id": 7})

        logger = get_logger("catalog.scripts", script="create_tables")
        ```
    """
    _ensure_logging_configured()

    if name is None:
        name = _detect_calling_module()

    base_logger = get_configured_logger(name)

    if extra_context:
        logger: Union[logging.Logger, logging.LoggerAdapter] = logging.LoggerAdapter(base_logger, extra_context)
    else:
        logger = base_logger

    return logger


def configure_logging() -> None:
    """Configure logging now instead of on the first ``get_logger`` call.

    Safe to call repeatedly; only the first call has an effect.
    """
    global _logging_configured

    with _configuration_lock:
        if not _logging_configured:
            setup_logging_configuration()
            _logging_configured = True

            settings = get_settings()
            logging.getLogger(__name__).info(
                f"Logging configured for {settings.ENVIRONMENT.value} environment",
                extra={
                    "log_level": settings.LOG_LEVEL,
                    "log_format": settings.LOG_FORMAT,
                    "console_enabled": settings.LOG_CONSOLE_ENABLED,
                    "file_enabled": settings.LOG_FILE_ENABLED,
                },
            )


def _ensure_logging_configured() -> None:
    """Ensure logging is configured, calling setup if needed."""
    if not _logging_configured:
        configure_logging()


def _detect_calling_module() -> str:
    """Detect the module name of the code that called ``get_logger``."""
    frame = inspect.currentframe()

    try:
        for _ in range(2):
            if frame is None:
                break
            frame = frame.f_back

        if frame is not None:
            return str(frame.f_globals.get("__name__", "unknown"))
        return "unknown"

    finally:
        del frame
