from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import Settings, settings


def build_engine(app_settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured backend.

    Pool sizing only applies to Postgres; SQLite engines use the pool class
    SQLAlchemy picks for the aiosqlite dialect, which rejects those options.
    """
    engine_kwargs: Dict[str, Any] = {"echo": app_settings.LOG_SQL_QUERIES, "future": True}
    if not app_settings.USES_SQLITE:
        engine_kwargs["pool_size"] = app_settings.POSTGRES_POOL_SIZE
        engine_kwargs["max_overflow"] = app_settings.POSTGRES_MAX_OVERFLOW

    return create_async_engine(app_settings.DATABASE_URL, **engine_kwargs)


engine = build_engine(settings)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all catalog models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass so every
    model gets a generated ``__init__``/``__repr__`` from its mapped columns.

    Example:
        ```python
        class Genre(Base):
            __tablename__ = "genres"

            id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
            name: Mapped[str] = mapped_column(String(100))

        genre = Genre(name="Fantasy")
        ```
    """

    pass


async def create_tables() -> None:
    """Create all tables in the database if they don't exist.

    Idempotent: only missing tables are created. Used during application
    startup and by ``scripts/create_tables.py``.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
