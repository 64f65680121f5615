"""Tests for author service."""

from datetime import date
from typing import Any, Dict

import pytest

from catalog.modules.author.schemas import AuthorRead
from catalog.modules.author.services import AUTHOR_LIST_URL, AuthorService
from catalog.modules.common.constants import EntityKind
from catalog.modules.common.exceptions import AuthorNotFoundError, ResourceExistsError, ValidationError
from catalog.modules.common.store import SqlDocumentStore


@pytest.fixture
def author_service(store: SqlDocumentStore, renderer):
    """Create author service instance."""
    return AuthorService(store, renderer)


def test_author_read_display_fields():
    """Test the derived name, lifespan and URL of an author."""
    author = AuthorRead(
        id=4, first_name="Isaac", family_name="Asimov", date_of_birth=date(1920, 1, 2), date_of_death=date(1992, 4, 6)
    )

    assert author.name == "Asimov, Isaac"
    assert author.lifespan == "1920-01-02 - 1992-04-06"
    assert author.url == "/catalog/author/4"

    living = AuthorRead(id=5, first_name="Ann", family_name="Leckie", date_of_birth=date(1966, 3, 2))
    assert living.lifespan == "1966-03-02 -"

    undated = AuthorRead(id=6, first_name="Ann", family_name="Leckie")
    assert undated.lifespan == ""


def test_author_read_lifespan_with_only_death_date():
    """Test that an unknown birth date is spelled out instead of leaving a bare dash."""
    author = AuthorRead(id=7, first_name="Homer", family_name="Poet", date_of_death=date(1992, 4, 6))

    assert author.lifespan == "unknown - 1992-04-06"


@pytest.mark.asyncio
async def test_list_authors_sorted_by_family_name(author_service: AuthorService, renderer, test_author, test_author_2):
    """Test that authors are listed by family name."""
    await author_service.list_authors()

    assert renderer.template == "author_list"
    assert renderer.context["title"] == "Author List"
    assert [author.name for author in renderer.context["author_list"]] == ["Asimov, Isaac", "Rothfuss, Patrick"]


@pytest.mark.asyncio
async def test_get_author_detail(author_service: AuthorService, renderer, test_book: Dict[str, Any]):
    """Test the detail page lists the author's books."""
    await author_service.get_author_detail(test_book["author_id"])

    assert renderer.template == "author_detail"
    assert renderer.context["author"].family_name == "Rothfuss"
    assert [book.url for book in renderer.context["author_books"]] == [f"/catalog/book/{test_book['id']}"]


@pytest.mark.asyncio
async def test_get_author_detail_without_books(author_service: AuthorService, renderer, test_author_2):
    """Test the detail page of an author with no books."""
    await author_service.get_author_detail(test_author_2["id"])

    assert renderer.context["author"].name == "Asimov, Isaac"
    assert renderer.context["author_books"] == []


@pytest.mark.asyncio
async def test_get_author_detail_not_found(author_service: AuthorService):
    """Test the detail page of a missing author."""
    with pytest.raises(AuthorNotFoundError):
        await author_service.get_author_detail(99999)


@pytest.mark.asyncio
async def test_create_author(author_service: AuthorService, store: SqlDocumentStore):
    """Test creating an author redirects to the new author's page."""
    response = await author_service.create_author(
        {"first_name": "Ursula", "family_name": "LeGuin", "date_of_birth": "1929-10-21", "date_of_death": "2018-01-22"}
    )

    authors = await store.find_all(EntityKind.AUTHOR)
    assert len(authors) == 1
    assert authors[0]["date_of_birth"] == date(1929, 10, 21)
    assert authors[0]["date_of_death"] == date(2018, 1, 22)
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/author/{authors[0]['id']}"


@pytest.mark.asyncio
async def test_create_author_without_dates(author_service: AuthorService, store: SqlDocumentStore):
    """Test that blank dates are stored as unknown."""
    await author_service.create_author({"first_name": "Homer", "family_name": "Unknown", "date_of_birth": ""})

    authors = await store.find_all(EntityKind.AUTHOR)
    assert authors[0]["date_of_birth"] is None
    assert authors[0]["date_of_death"] is None


@pytest.mark.asyncio
async def test_create_existing_author(author_service: AuthorService, store: SqlDocumentStore, test_author):
    """Test that the same full name is not catalogued twice."""
    response = await author_service.create_author({"first_name": "Patrick", "family_name": "Rothfuss"})

    assert response.headers["location"] == f"/catalog/author/{test_author['id']}"
    assert len(await store.find_all(EntityKind.AUTHOR)) == 1


@pytest.mark.asyncio
async def test_create_author_invalid(author_service: AuthorService, renderer, store: SqlDocumentStore):
    """Test that rejected submissions redisplay the form with what was typed."""
    response = await author_service.create_author(
        {"first_name": "John2!", "family_name": "Smith", "date_of_birth": "yesterday"}
    )

    assert response.status_code == 200
    assert renderer.template == "author_form"
    assert renderer.context["title"] == "Create Author"
    draft = renderer.context["author"]
    assert draft.first_name == "John2!"
    assert draft.family_name == "Smith"
    assert draft.date_of_birth == "yesterday"
    assert [error.field for error in renderer.context["errors"]] == ["first_name", "date_of_birth"]
    assert await store.find_all(EntityKind.AUTHOR) == []


@pytest.mark.asyncio
async def test_update_author(author_service: AuthorService, store: SqlDocumentStore, test_author):
    """Test updating an author keeps its identifier and URL."""
    response = await author_service.update_author(
        test_author["id"],
        {"first_name": "Pat", "family_name": "Rothfuss", "date_of_birth": "1973-06-06", "date_of_death": ""},
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/author/{test_author['id']}"
    stored = await store.find_by_id(EntityKind.AUTHOR, test_author["id"])
    assert stored["first_name"] == "Pat"
    assert stored["date_of_birth"] == date(1973, 6, 6)


@pytest.mark.asyncio
async def test_update_author_clears_dates(author_service: AuthorService, store: SqlDocumentStore, test_author_2):
    """Test that every field is overwritten, including blank dates."""
    await author_service.update_author(test_author_2["id"], {"first_name": "Isaac", "family_name": "Asimov"})

    stored = await store.find_by_id(EntityKind.AUTHOR, test_author_2["id"])
    assert stored["date_of_birth"] is None
    assert stored["date_of_death"] is None


@pytest.mark.asyncio
async def test_update_author_invalid(author_service: AuthorService, renderer, store: SqlDocumentStore, test_author):
    """Test that an invalid update leaves the stored author untouched."""
    await author_service.update_author(test_author["id"], {"first_name": "", "family_name": "Rothfuss"})

    assert renderer.context["title"] == "Update Author"
    assert renderer.context["author"].url == f"/catalog/author/{test_author['id']}"
    assert [error.message for error in renderer.context["errors"]] == ["First name must be specified"]
    stored = await store.find_by_id(EntityKind.AUTHOR, test_author["id"])
    assert stored["first_name"] == "Patrick"


@pytest.mark.asyncio
async def test_update_author_name_taken(author_service: AuthorService, test_author, test_author_2):
    """Test renaming an author onto another author's full name."""
    with pytest.raises(ResourceExistsError):
        await author_service.update_author(test_author_2["id"], {"first_name": "Patrick", "family_name": "Rothfuss"})


@pytest.mark.asyncio
async def test_show_update_form_not_found(author_service: AuthorService):
    """Test the update form of a missing author."""
    with pytest.raises(AuthorNotFoundError):
        await author_service.show_update_form(99999)


@pytest.mark.asyncio
async def test_delete_author(author_service: AuthorService, store: SqlDocumentStore, test_author_2):
    """Test deleting an author without books."""
    response = await author_service.delete_author(test_author_2["id"], {"authorid": str(test_author_2["id"])})

    assert response.status_code == 303
    assert response.headers["location"] == AUTHOR_LIST_URL
    assert await store.find_by_id(EntityKind.AUTHOR, test_author_2["id"]) is None


@pytest.mark.asyncio
async def test_delete_author_with_books(author_service: AuthorService, renderer, store: SqlDocumentStore, test_book):
    """Test that an author with books is not deleted."""
    author_id = test_book["author_id"]

    response = await author_service.delete_author(author_id, {"authorid": str(author_id)})

    assert response.status_code == 200
    assert renderer.template == "author_delete"
    assert len(renderer.context["author_books"]) == 1
    assert await store.find_by_id(EntityKind.AUTHOR, author_id) is not None


@pytest.mark.asyncio
async def test_delete_author_mismatched_form(author_service: AuthorService, test_author):
    """Test that the form must name the author in the route."""
    with pytest.raises(ValidationError):
        await author_service.delete_author(test_author["id"], {"authorid": "not-an-id"})


@pytest.mark.asyncio
async def test_show_delete_form_not_found(author_service: AuthorService):
    """Test the delete confirmation of a missing author."""
    with pytest.raises(AuthorNotFoundError):
        await author_service.show_delete_form(99999)
