"""Settings, database and logging shared by the catalog."""

from .config import get_settings
from .database.session import Base, create_tables, local_session
from .logging import configure_logging, get_logger

__all__ = [
    "Base",
    "configure_logging",
    "create_tables",
    "get_logger",
    "get_settings",
    "local_session",
]
