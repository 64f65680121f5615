"""Author lifecycle service: list, detail, create, update and delete workflows."""

from typing import Any, List, Mapping, Optional

from fastapi.responses import Response

from ...infrastructure.logging import get_logger
from ..book.schemas import BookSummary
from ..common.constants import CATALOG_PREFIX, EntityKind
from ..common.exceptions import AuthorNotFoundError
from ..common.lifecycle import (
    ViewRenderer,
    fetch_with_dependents,
    insert_unless_exists,
    is_blocked_by_dependents,
    redirect,
    submitted_id,
)
from ..common.store import DocumentStore
from ..common.validation import FieldError, FormValidator
from .schemas import AuthorCreate, AuthorDraft, AuthorForm, AuthorRead

logger = get_logger(__name__)

AUTHOR_LIST_URL = f"{CATALOG_PREFIX}/authors"


class AuthorService:
    """Orchestrates the author pages.

    Mirrors the genre workflows. Authors are listed by family name and are
    deduplicated on their (first_name, family_name) pair.
    """

    def __init__(self, store: DocumentStore, renderer: ViewRenderer, validator: Optional[FormValidator] = None):
        self.store = store
        self.renderer = renderer
        self.validator = validator or FormValidator()

    async def _author_with_books(self, author_id: int) -> tuple[AuthorRead, List[BookSummary]]:
        author, books = await fetch_with_dependents(self.store, EntityKind.AUTHOR, author_id, "author_id", BookSummary)
        if author is None:
            raise AuthorNotFoundError("Author not found")
        return AuthorRead(**author), [BookSummary(**book) for book in books]

    def _render_form(self, title: str, author: Any = None, errors: Optional[List[FieldError]] = None) -> Response:
        return self.renderer.render("author_form", {"title": title, "author": author, "errors": errors or []})

    def _render_delete(self, author: AuthorRead, books: List[BookSummary]) -> Response:
        return self.renderer.render(
            "author_delete", {"title": "Delete Author", "author": author, "author_books": books}
        )

    async def list_authors(self) -> Response:
        """Display all authors ordered by family name."""
        authors = await self.store.find_all(EntityKind.AUTHOR, sort="family_name")
        return self.renderer.render(
            "author_list", {"title": "Author List", "author_list": [AuthorRead(**author) for author in authors]}
        )

    async def get_author_detail(self, author_id: int) -> Response:
        """Display one author with the books they wrote.

        Raises:
            AuthorNotFoundError: No author has this identifier
        """
        author, books = await self._author_with_books(author_id)
        return self.renderer.render(
            "author_detail", {"title": "Author Detail", "author": author, "author_books": books}
        )

    async def show_create_form(self) -> Response:
        return self._render_form("Create Author")

    async def create_author(self, form: Mapping[str, Any]) -> Response:
        """Handle the create form.

        An author with the same first and family name is not created twice:
        the caller is sent to the existing author instead.
        """
        outcome = self.validator.validate(AuthorForm, form)
        draft = AuthorDraft(**outcome.values)

        if not outcome.is_valid:
            return self._render_form("Create Author", draft, outcome.errors)

        natural_key = {"first_name": outcome.values["first_name"], "family_name": outcome.values["family_name"]}
        doc, created = await insert_unless_exists(
            self.store, EntityKind.AUTHOR, AuthorCreate(**outcome.values), natural_key
        )
        author = AuthorRead(**doc)
        if created:
            logger.info("Author created", extra={"author_id": author.id, "author_name": author.name})
        return redirect(author.url)

    async def show_update_form(self, author_id: int) -> Response:
        """Display the update form pre-filled with the stored author.

        Raises:
            AuthorNotFoundError: No author has this identifier
        """
        author = await self.store.find_by_id(EntityKind.AUTHOR, author_id)
        if author is None:
            raise AuthorNotFoundError("Author not found")
        return self._render_form("Update Author", AuthorRead(**author))

    async def update_author(self, author_id: int, form: Mapping[str, Any]) -> Response:
        """Handle the update form, overwriting every field but the identifier."""
        outcome = self.validator.validate(AuthorForm, form)
        draft = AuthorDraft(id=author_id, **outcome.values)

        if not outcome.is_valid:
            return self._render_form("Update Author", draft, outcome.errors)

        doc = await self.store.update_by_id(EntityKind.AUTHOR, author_id, outcome.values)
        author = AuthorRead(**doc)
        logger.info("Author updated", extra={"author_id": author.id, "author_name": author.name})
        return redirect(author.url)

    async def show_delete_form(self, author_id: int) -> Response:
        """Display the delete confirmation with any books still credited to the author.

        Raises:
            AuthorNotFoundError: No author has this identifier
        """
        author, books = await self._author_with_books(author_id)
        return self._render_delete(author, books)

    async def delete_author(self, author_id: int, form: Mapping[str, Any]) -> Response:
        """Handle the delete confirmation.

        Re-reads the author's books; while any exist the confirmation page is
        shown again listing them and nothing is deleted.
        """
        author, books = await self._author_with_books(author_id)

        if is_blocked_by_dependents(books):
            logger.warning("Author delete blocked by books", extra={"author_id": author.id, "book_count": len(books)})
            return self._render_delete(author, books)

        await self.store.delete_by_id(EntityKind.AUTHOR, submitted_id(form, "authorid", author_id))
        logger.info("Author deleted", extra={"author_id": author.id, "author_name": author.name})
        return redirect(AUTHOR_LIST_URL)
