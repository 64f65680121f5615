import logging
import os
from enum import Enum

from pydantic_settings import BaseSettings
from starlette.config import Config

logger = logging.getLogger(__name__)

current_file_dir = os.path.dirname(os.path.realpath(__file__))
project_root = os.path.abspath(os.path.join(current_file_dir, "..", "..", ".."))

# First existing file wins; without one, values come from the process environment.
env_path = next(
    (path for path in (os.path.join(project_root, ".env"), os.path.join(os.getcwd(), ".env")) if os.path.isfile(path)),
    None,
)
if env_path:
    logger.info(f"Using environment file at: {env_path}")

config = Config(env_path)


class EnvironmentOption(str, Enum):
    """Deployment environments the catalog knows about."""

    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"
    LOCAL = "local"


class EnvironmentSettings(BaseSettings):
    ENVIRONMENT: EnvironmentOption = config("ENVIRONMENT", default=EnvironmentOption.DEVELOPMENT, cast=EnvironmentOption)


class DatabaseSettings(BaseSettings):
    """Where authors, genres and books are stored.

    Postgres is the default backend. Setting ``SQLITE_URI`` (a file path or
    ``:memory:``) switches the catalog to aiosqlite, which is what local runs
    and the test suite use.
    """

    POSTGRES_USER: str = config("POSTGRES_USER", default="postgres")
    POSTGRES_PASSWORD: str = config("POSTGRES_PASSWORD", default="postgres")
    POSTGRES_SERVER: str = config("POSTGRES_SERVER", default="localhost")
    POSTGRES_PORT: int = config("POSTGRES_PORT", default=5432, cast=int)
    POSTGRES_DB: str = config("POSTGRES_DB", default="local_library")
    POSTGRES_ASYNC_PREFIX: str = config("POSTGRES_ASYNC_PREFIX", default="postgresql+asyncpg://")
    POSTGRES_POOL_SIZE: int = config("POSTGRES_POOL_SIZE", default=10, cast=int)
    POSTGRES_MAX_OVERFLOW: int = config("POSTGRES_MAX_OVERFLOW", default=5, cast=int)

    SQLITE_URI: str = config("SQLITE_URI", default="")
    SQLITE_ASYNC_PREFIX: str = config("SQLITE_ASYNC_PREFIX", default="sqlite+aiosqlite:///")

    CREATE_TABLES_ON_STARTUP: bool = config("CREATE_TABLES_ON_STARTUP", default=True, cast=bool)

    @property
    def USES_SQLITE(self) -> bool:
        return bool(self.SQLITE_URI)

    @property
    def DATABASE_URL(self) -> str:
        if self.USES_SQLITE:
            return f"{self.SQLITE_ASYNC_PREFIX}{self.SQLITE_URI}"
        return (
            f"{self.POSTGRES_ASYNC_PREFIX}{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


class CompressionSettings(BaseSettings):
    GZIP_ENABLED: bool = config("GZIP_ENABLED", default=True, cast=bool)
    GZIP_MINIMUM_SIZE: int = config("GZIP_MINIMUM_SIZE", default=1000, cast=int)


class APIDocSettings(BaseSettings):
    """OpenAPI pages. The catalog is HTML-first, so these are hidden in production unless enabled."""

    ENABLE_DOCS_IN_PRODUCTION: bool = config("ENABLE_DOCS_IN_PRODUCTION", default=False, cast=bool)
    DOCS_URL: str = config("DOCS_URL", default="/docs")
    REDOC_URL: str = config("REDOC_URL", default="/redoc")
    OPENAPI_URL: str = config("OPENAPI_URL", default="/openapi.json")


class AppSettings(BaseSettings):
    APP_NAME: str = config("APP_NAME", default="Local Library")
    APP_DESCRIPTION: str = "Catalog of authors, genres and the books that reference them"
    VERSION: str = "0.1.0"


class LoggingSettings(BaseSettings):
    """Logging configuration.

    ``LOG_FORMAT`` is one of "simple", "detailed", "structured" or "json"
    and applies to the staging console output; development always logs in
    the detailed format and production in JSON.
    """

    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")
    LOG_FORMAT: str = config("LOG_FORMAT", default="structured")

    LOG_CONSOLE_ENABLED: bool = config("LOG_CONSOLE_ENABLED", default=True, cast=bool)
    LOG_FILE_ENABLED: bool = config("LOG_FILE_ENABLED", default=False, cast=bool)
    LOG_FILE_PATH: str = config("LOG_FILE_PATH", default="logs/catalog.log")
    LOG_FILE_MAX_SIZE: int = config("LOG_FILE_MAX_SIZE", default=10485760, cast=int)
    LOG_FILE_BACKUP_COUNT: int = config("LOG_FILE_BACKUP_COUNT", default=5, cast=int)

    LOG_SQL_QUERIES: bool = config("LOG_SQL_QUERIES", default=False, cast=bool)

    LOG_DEVELOPMENT_VERBOSE: bool = config("LOG_DEVELOPMENT_VERBOSE", default=True, cast=bool)
    LOG_PRODUCTION_OPTIMIZE: bool = config("LOG_PRODUCTION_OPTIMIZE", default=True, cast=bool)

    @property
    def LOG_LEVEL_INT(self) -> int:
        """Numeric level for ``LOG_LEVEL``; unknown names fall back to INFO."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


class Settings(
    EnvironmentSettings,
    DatabaseSettings,
    CompressionSettings,
    APIDocSettings,
    AppSettings,
    LoggingSettings,
):
    pass


settings = Settings()


def get_settings() -> Settings:
    return settings
