from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from .config.settings import (
    DatabaseSettings,
    EnvironmentOption,
    EnvironmentSettings,
    Settings,
    get_settings,
)
from .database.session import create_tables
from .logging import configure_logging, get_logger

logger = get_logger(__name__)


def lifespan_factory(
    settings: Settings,
    create_tables_on_startup: bool = True,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    Args:
        settings: Application settings
        create_tables_on_startup: Whether to create database tables on startup

    Returns:
        An async context manager for FastAPI's lifespan
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging()

        if isinstance(settings, DatabaseSettings) and create_tables_on_startup:
            await create_tables()
            logger.info("Database tables ready", extra={"sqlite": settings.USES_SQLITE})

        yield

    return lifespan


def create_application(
    router: APIRouter,
    settings: Optional[Settings] = None,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[None]]] = None,
    create_tables_on_startup: Optional[bool] = None,
    enable_docs_in_production: Optional[bool] = None,
    enable_gzip: Optional[bool] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures a FastAPI application based on the provided settings.

    Args:
        router: The APIRouter containing the routes for the application
        settings: Application settings (uses get_settings() if None)
        lifespan: Optional lifespan function. If None, uses lifespan_factory.
        create_tables_on_startup: Whether to create database tables on startup.
            Defaults to settings.CREATE_TABLES_ON_STARTUP if None.
        enable_docs_in_production: Whether to serve the OpenAPI docs in production.
            Defaults to settings.ENABLE_DOCS_IN_PRODUCTION if None.
        enable_gzip: Whether to enable GZip compression middleware.
            Defaults to settings.GZIP_ENABLED if None.
        title: The title of the application (defaults to settings.APP_NAME).
        description: A description of the application (defaults to settings.APP_DESCRIPTION).
        version: The version of the application (defaults to settings.VERSION).
        **kwargs: Additional keyword arguments passed to FastAPI constructor

    Returns:
        A configured FastAPI application
    """

    if settings is None:
        settings = get_settings()

    _create_tables_on_startup = settings.CREATE_TABLES_ON_STARTUP
    if create_tables_on_startup is not None:
        _create_tables_on_startup = create_tables_on_startup

    _enable_docs_in_production = settings.ENABLE_DOCS_IN_PRODUCTION
    if enable_docs_in_production is not None:
        _enable_docs_in_production = enable_docs_in_production

    _enable_gzip = settings.GZIP_ENABLED
    if enable_gzip is not None:
        _enable_gzip = enable_gzip

    metadata: Dict[str, Any] = {
        "title": title if title is not None else settings.APP_NAME,
        "description": description if description is not None else settings.APP_DESCRIPTION,
        "version": version if version is not None else settings.VERSION,
        "docs_url": settings.DOCS_URL,
        "redoc_url": settings.REDOC_URL,
        "openapi_url": settings.OPENAPI_URL,
    }

    hide_docs = (
        isinstance(settings, EnvironmentSettings)
        and settings.ENVIRONMENT == EnvironmentOption.PRODUCTION
        and not _enable_docs_in_production
    )
    if hide_docs:
        metadata.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

    kwargs.update(metadata)

    if lifespan is None:
        lifespan = lifespan_factory(settings, create_tables_on_startup=_create_tables_on_startup)

    application = FastAPI(lifespan=lifespan, **kwargs)

    application.include_router(router)

    if _enable_gzip:
        application.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

    return application
