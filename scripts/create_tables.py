"""Script to create the catalog tables from the SQLAlchemy models."""

import asyncio
import sys

from catalog.infrastructure import create_tables, get_logger, get_settings
from catalog.modules.author.models import Author  # noqa: F401
from catalog.modules.book.models import Book  # noqa: F401
from catalog.modules.genre.models import Genre  # noqa: F401

logger = get_logger(__name__)


async def main() -> None:
    """Create database tables."""
    settings = get_settings()
    logger.info("Creating database tables...", extra={"sqlite": settings.USES_SQLITE})

    try:
        await create_tables()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
