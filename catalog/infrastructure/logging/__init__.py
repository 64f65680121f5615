"""Centralized logging infrastructure for the catalog.

Provides environment-aware configuration driven by the application
settings, so modules never configure handlers themselves.

Usage:
    ```python
    from catalog.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Genre created", extra={"genre_id": 12})
    ```
"""

from .config import configure_testing_logging, setup_logging_configuration
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "setup_logging_configuration",
]
