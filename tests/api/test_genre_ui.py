"""UI tests for the genre pages."""

from typing import Any, Dict

import pytest
from httpx import AsyncClient

from catalog.modules.common.constants import EntityKind
from catalog.modules.common.store import SqlDocumentStore


class TestGenrePages:
    """Tests for the genre pages and forms."""

    @pytest.mark.asyncio
    async def test_index_redirects_to_genres(self, client: AsyncClient):
        """Test that the site root leads to the genre list."""
        response = await client.get("/")

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/genres"

    @pytest.mark.asyncio
    async def test_health_check(self, client: AsyncClient):
        """Test the health endpoint."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_genre_list(self, client: AsyncClient, test_genre: Dict[str, Any]):
        """Test the genre list links every genre."""
        response = await client.get("/catalog/genres")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Genre List" in response.text
        assert f'href="/catalog/genre/{test_genre["id"]}"' in response.text
        assert "Fantasy" in response.text

    @pytest.mark.asyncio
    async def test_genre_list_empty(self, client: AsyncClient):
        """Test the genre list without genres."""
        response = await client.get("/catalog/genres")

        assert response.status_code == 200
        assert "There are no genres." in response.text

    @pytest.mark.asyncio
    async def test_genre_detail(self, client: AsyncClient, test_book: Dict[str, Any]):
        """Test the genre detail page lists its books."""
        response = await client.get(f"/catalog/genre/{test_book['genre_id']}")

        assert response.status_code == 200
        assert "Genre: Fantasy" in response.text
        assert "The Name of the Wind" in response.text
        assert f'href="/catalog/book/{test_book["id"]}"' in response.text

    @pytest.mark.asyncio
    async def test_genre_detail_not_found(self, client: AsyncClient):
        """Test that an unknown genre renders the error page."""
        response = await client.get("/catalog/genre/99999")

        assert response.status_code == 404
        assert "Genre not found" in response.text

    @pytest.mark.asyncio
    async def test_genre_detail_invalid_id(self, client: AsyncClient):
        """Test that a non-numeric identifier is rejected."""
        response = await client.get("/catalog/genre/not-a-number")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_form(self, client: AsyncClient):
        """Test the create form renders."""
        response = await client.get("/catalog/genre/create")

        assert response.status_code == 200
        assert "Create Genre" in response.text
        assert 'name="name"' in response.text

    @pytest.mark.asyncio
    async def test_create_genre(self, client: AsyncClient, store: SqlDocumentStore):
        """Test submitting the create form."""
        response = await client.post("/catalog/genre/create", data={"name": "Fantasy"})

        genres = await store.find_all(EntityKind.GENRE)
        assert len(genres) == 1
        assert response.status_code == 303
        assert response.headers["location"] == f"/catalog/genre/{genres[0]['id']}"

    @pytest.mark.asyncio
    async def test_create_genre_twice(self, client: AsyncClient, store: SqlDocumentStore):
        """Test that submitting the same name twice leads to the same genre."""
        first = await client.post("/catalog/genre/create", data={"name": "Fantasy"})
        second = await client.post("/catalog/genre/create", data={"name": " Fantasy "})

        assert first.headers["location"] == second.headers["location"]
        assert len(await store.find_all(EntityKind.GENRE)) == 1

    @pytest.mark.asyncio
    async def test_create_genre_too_short(self, client: AsyncClient, store: SqlDocumentStore):
        """Test that the form is redisplayed with the error message."""
        response = await client.post("/catalog/genre/create", data={"name": "ab"})

        assert response.status_code == 200
        assert "Genre name must contain at least 3 characters" in response.text
        assert 'value="ab"' in response.text
        assert await store.find_all(EntityKind.GENRE) == []

    @pytest.mark.asyncio
    async def test_submitted_markup_is_escaped(self, client: AsyncClient):
        """Test that submitted values are escaped when redisplayed."""
        response = await client.post("/catalog/genre/create", data={"name": "<i"})

        assert response.status_code == 200
        assert 'value="&lt;i"' in response.text
        assert 'value="<i"' not in response.text

    @pytest.mark.asyncio
    async def test_update_form(self, client: AsyncClient, test_genre: Dict[str, Any]):
        """Test the update form is pre-filled."""
        response = await client.get(f"/catalog/genre/{test_genre['id']}/update")

        assert response.status_code == 200
        assert "Update Genre" in response.text
        assert 'value="Fantasy"' in response.text

    @pytest.mark.asyncio
    async def test_update_genre(self, client: AsyncClient, store: SqlDocumentStore, test_genre: Dict[str, Any]):
        """Test submitting the update form."""
        response = await client.post(f"/catalog/genre/{test_genre['id']}/update", data={"name": "Dark Fantasy"})

        assert response.status_code == 303
        assert response.headers["location"] == f"/catalog/genre/{test_genre['id']}"
        stored = await store.find_by_id(EntityKind.GENRE, test_genre["id"])
        assert stored["name"] == "Dark Fantasy"

    @pytest.mark.asyncio
    async def test_update_genre_not_found(self, client: AsyncClient):
        """Test updating a missing genre."""
        response = await client.post("/catalog/genre/99999/update", data={"name": "Mystery"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_genre_name_taken(
        self, client: AsyncClient, test_genre: Dict[str, Any], test_genre_2: Dict[str, Any]
    ):
        """Test renaming onto an existing genre name."""
        response = await client.post(f"/catalog/genre/{test_genre_2['id']}/update", data={"name": "Fantasy"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_delete_form(self, client: AsyncClient, test_genre: Dict[str, Any]):
        """Test the delete confirmation of a genre without books."""
        response = await client.get(f"/catalog/genre/{test_genre['id']}/delete")

        assert response.status_code == 200
        assert "Do you really want to delete this genre?" in response.text
        assert f'name="genreid" value="{test_genre["id"]}"' in response.text

    @pytest.mark.asyncio
    async def test_delete_genre(self, client: AsyncClient, store: SqlDocumentStore, test_genre: Dict[str, Any]):
        """Test confirming a genre delete."""
        response = await client.post(
            f"/catalog/genre/{test_genre['id']}/delete", data={"genreid": str(test_genre["id"])}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/genres"
        assert await store.find_by_id(EntityKind.GENRE, test_genre["id"]) is None

    @pytest.mark.asyncio
    async def test_delete_genre_with_books(
        self, client: AsyncClient, store: SqlDocumentStore, test_book: Dict[str, Any]
    ):
        """Test that a genre with books stays and its books are listed."""
        genre_id = test_book["genre_id"]

        response = await client.post(f"/catalog/genre/{genre_id}/delete", data={"genreid": str(genre_id)})

        assert response.status_code == 200
        assert "Delete the following books before attempting to delete this genre." in response.text
        assert "The Name of the Wind" in response.text
        assert await store.find_by_id(EntityKind.GENRE, genre_id) is not None

    @pytest.mark.asyncio
    async def test_delete_genre_mismatched_id(
        self, client: AsyncClient, store: SqlDocumentStore, test_genre: Dict[str, Any]
    ):
        """Test that a delete form naming another genre is rejected."""
        response = await client.post(f"/catalog/genre/{test_genre['id']}/delete", data={"genreid": "abc"})

        assert response.status_code == 422
        assert await store.find_by_id(EntityKind.GENRE, test_genre["id"]) is not None

    @pytest.mark.asyncio
    async def test_delete_genre_not_found(self, client: AsyncClient):
        """Test deleting a missing genre."""
        response = await client.post("/catalog/genre/99999/delete", data={"genreid": "99999"})

        assert response.status_code == 404
