"""Genre lifecycle service: list, detail, create, update and delete workflows."""

from typing import Any, List, Mapping, Optional

from fastapi.responses import Response

from ...infrastructure.logging import get_logger
from ..book.schemas import BookSummary
from ..common.constants import CATALOG_PREFIX, EntityKind
from ..common.exceptions import GenreNotFoundError
from ..common.lifecycle import (
    ViewRenderer,
    fetch_with_dependents,
    insert_unless_exists,
    is_blocked_by_dependents,
    redirect,
    submitted_id,
)
from ..common.store import Doc, DocumentStore
from ..common.validation import FieldError, FormValidator
from .schemas import GenreCreate, GenreDraft, GenreForm, GenreRead

logger = get_logger(__name__)

GENRE_LIST_URL = f"{CATALOG_PREFIX}/genres"


class GenreService:
    """Orchestrates the genre pages.

    Every workflow reads and writes through the injected document store and
    produces its response through the injected renderer. Each public method
    maps to one page or form submission.
    """

    def __init__(self, store: DocumentStore, renderer: ViewRenderer, validator: Optional[FormValidator] = None):
        self.store = store
        self.renderer = renderer
        self.validator = validator or FormValidator()

    async def _genre_with_books(self, genre_id: int) -> tuple[GenreRead, List[BookSummary]]:
        genre, books = await fetch_with_dependents(self.store, EntityKind.GENRE, genre_id, "genre_id", BookSummary)
        if genre is None:
            raise GenreNotFoundError("Genre not found")
        return GenreRead(**genre), [BookSummary(**book) for book in books]

    async def _get_genre(self, genre_id: int) -> GenreRead:
        genre = await self.store.find_by_id(EntityKind.GENRE, genre_id)
        if genre is None:
            raise GenreNotFoundError("Genre not found")
        return GenreRead(**genre)

    def _render_form(self, title: str, genre: Any = None, errors: Optional[List[FieldError]] = None) -> Response:
        return self.renderer.render("genre_form", {"title": title, "genre": genre, "errors": errors or []})

    async def list_genres(self) -> Response:
        """Display all genres in store order."""
        genres = await self.store.find_all(EntityKind.GENRE)
        return self.renderer.render(
            "genre_list", {"title": "Genre List", "genre_list": [GenreRead(**genre) for genre in genres]}
        )

    async def get_genre_detail(self, genre_id: int) -> Response:
        """Display one genre with the books filed under it.

        Raises:
            GenreNotFoundError: No genre has this identifier
        """
        genre, books = await self._genre_with_books(genre_id)
        return self.renderer.render("genre_detail", {"title": "Genre Detail", "genre": genre, "genre_books": books})

    async def show_create_form(self) -> Response:
        return self._render_form("Create Genre")

    async def create_genre(self, form: Mapping[str, Any]) -> Response:
        """Handle the create form.

        A genre whose name is already catalogued is not created twice: the
        caller is sent to the existing genre instead.
        """
        outcome = self.validator.validate(GenreForm, form)
        draft = GenreDraft(**outcome.values)

        if not outcome.is_valid:
            return self._render_form("Create Genre", draft, outcome.errors)

        doc, created = await insert_unless_exists(
            self.store, EntityKind.GENRE, GenreCreate(**outcome.values), {"name": outcome.values["name"]}
        )
        genre = GenreRead(**doc)
        if created:
            logger.info("Genre created", extra={"genre_id": genre.id, "genre_name": genre.name})
        return redirect(genre.url)

    async def show_update_form(self, genre_id: int) -> Response:
        """Display the update form pre-filled with the stored genre.

        Raises:
            GenreNotFoundError: No genre has this identifier
        """
        genre = await self._get_genre(genre_id)
        return self._render_form("Update Genre", genre)

    async def update_genre(self, genre_id: int, form: Mapping[str, Any]) -> Response:
        """Handle the update form, overwriting the genre in place."""
        outcome = self.validator.validate(GenreForm, form)
        draft = GenreDraft(id=genre_id, **outcome.values)

        if not outcome.is_valid:
            return self._render_form("Update Genre", draft, outcome.errors)

        doc: Doc = await self.store.update_by_id(EntityKind.GENRE, genre_id, outcome.values)
        genre = GenreRead(**doc)
        logger.info("Genre updated", extra={"genre_id": genre.id, "genre_name": genre.name})
        return redirect(genre.url)

    async def show_delete_form(self, genre_id: int) -> Response:
        """Display the delete confirmation with any books still in the genre.

        Raises:
            GenreNotFoundError: No genre has this identifier
        """
        genre, books = await self._genre_with_books(genre_id)
        return self.renderer.render("genre_delete", {"title": "Delete Genre", "genre": genre, "genre_books": books})

    async def delete_genre(self, genre_id: int, form: Mapping[str, Any]) -> Response:
        """Handle the delete confirmation.

        The genre and its books are read again rather than trusted from the
        confirmation page. While any book is filed under the genre the
        confirmation page is shown again listing those books.
        """
        genre, books = await self._genre_with_books(genre_id)

        if is_blocked_by_dependents(books):
            logger.warning("Genre delete blocked by books", extra={"genre_id": genre.id, "book_count": len(books)})
            return self.renderer.render(
                "genre_delete", {"title": "Delete Genre", "genre": genre, "genre_books": books}
            )

        await self.store.delete_by_id(EntityKind.GENRE, submitted_id(form, "genreid", genre_id))
        logger.info("Genre deleted", extra={"genre_id": genre.id, "genre_name": genre.name})
        return redirect(GENRE_LIST_URL)
