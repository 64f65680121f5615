"""Test configuration and fixtures for the library catalog."""

import os

# Set test environment variables before the application settings load
os.environ["SQLITE_URI"] = ":memory:"
os.environ["ENVIRONMENT"] = "local"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from datetime import date  # noqa: E402
from typing import Any, Dict, List, Mapping, Tuple  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.responses import HTMLResponse, Response  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from catalog.infrastructure.database.session import Base  # noqa: E402
from catalog.infrastructure.logging import configure_testing_logging  # noqa: E402
from catalog.interfaces.api.dependencies import COLLECTIONS, get_document_store  # noqa: E402
from catalog.interfaces.main import app  # noqa: E402
from catalog.modules.author.schemas import AuthorCreate  # noqa: E402
from catalog.modules.book.schemas import BookCreate  # noqa: E402
from catalog.modules.common.constants import EntityKind  # noqa: E402
from catalog.modules.common.store import SqlDocumentStore  # noqa: E402
from catalog.modules.genre.schemas import GenreCreate  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep log output out of the test report."""
    configure_testing_logging()


class RecordingRenderer:
    """Renderer double that records every render call."""

    def __init__(self):
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def render(self, template_name: str, data: Mapping[str, Any], status_code: int = 200) -> Response:
        self.calls.append((template_name, dict(data)))
        return HTMLResponse(f"<p>{template_name}</p>", status_code=status_code)

    @property
    def template(self) -> str:
        return self.calls[-1][0]

    @property
    def context(self) -> Dict[str, Any]:
        return self.calls[-1][1]


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(tmp_path):
    """Create a SQLite database file with the catalog tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_db_engine):
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def store(session_factory) -> SqlDocumentStore:
    """Document store bound to the test database."""
    return SqlDocumentStore(session_factory, COLLECTIONS)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest_asyncio.fixture(scope="function")
async def client(store: SqlDocumentStore):
    """Create a test client whose pages read and write the test database."""
    app.dependency_overrides = {}
    app.dependency_overrides[get_document_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def test_genre(store: SqlDocumentStore) -> Dict[str, Any]:
    """Create a test genre."""
    return await store.insert(EntityKind.GENRE, GenreCreate(name="Fantasy"))


@pytest_asyncio.fixture
async def test_genre_2(store: SqlDocumentStore) -> Dict[str, Any]:
    """Create a second test genre."""
    return await store.insert(EntityKind.GENRE, GenreCreate(name="Poetry"))


@pytest_asyncio.fixture
async def test_author(store: SqlDocumentStore) -> Dict[str, Any]:
    """Create a test author."""
    return await store.insert(
        EntityKind.AUTHOR,
        AuthorCreate(first_name="Patrick", family_name="Rothfuss", date_of_birth=date(1973, 6, 6)),
    )


@pytest_asyncio.fixture
async def test_author_2(store: SqlDocumentStore) -> Dict[str, Any]:
    """Create a second test author."""
    return await store.insert(
        EntityKind.AUTHOR,
        AuthorCreate(
            first_name="Isaac",
            family_name="Asimov",
            date_of_birth=date(1920, 1, 2),
            date_of_death=date(1992, 4, 6),
        ),
    )


@pytest_asyncio.fixture
async def test_book(store: SqlDocumentStore, test_author: Dict[str, Any], test_genre: Dict[str, Any]) -> Dict[str, Any]:
    """Create a book written by the test author and filed under the test genre."""
    return await store.insert(
        EntityKind.BOOK,
        BookCreate(
            title="The Name of the Wind",
            author_id=test_author["id"],
            genre_id=test_genre["id"],
            summary="Kvothe tells the story of his life.",
            isbn="9780756404741",
        ),
    )
