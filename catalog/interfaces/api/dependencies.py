"""FastAPI dependencies wiring the catalog services to their collaborators."""

from typing import Dict

from fastapi import Depends, Request
from fastcrud import FastCRUD

from ...infrastructure.database.session import local_session
from ...modules.author.crud import author_crud
from ...modules.author.services import AuthorService
from ...modules.book.crud import book_crud
from ...modules.common.constants import EntityKind
from ...modules.common.lifecycle import ViewRenderer
from ...modules.common.store import DocumentStore, SqlDocumentStore
from ...modules.common.validation import FormValidator
from ...modules.genre.crud import genre_crud
from ...modules.genre.services import GenreService
from ..rendering import TemplateRenderer, templates

COLLECTIONS: Dict[EntityKind, FastCRUD] = {
    EntityKind.AUTHOR: author_crud,
    EntityKind.GENRE: genre_crud,
    EntityKind.BOOK: book_crud,
}


def get_document_store() -> DocumentStore:
    """Dependency for providing the document store."""
    return SqlDocumentStore(local_session, COLLECTIONS)


def get_renderer(request: Request) -> ViewRenderer:
    """Dependency for providing a renderer bound to the current request."""
    return TemplateRenderer(templates, request)


def get_form_validator() -> FormValidator:
    """Dependency for providing a FormValidator instance."""
    return FormValidator()


def get_genre_service(
    store: DocumentStore = Depends(get_document_store),
    renderer: ViewRenderer = Depends(get_renderer),
    validator: FormValidator = Depends(get_form_validator),
) -> GenreService:
    """Dependency for providing a GenreService instance."""
    return GenreService(store, renderer, validator)


def get_author_service(
    store: DocumentStore = Depends(get_document_store),
    renderer: ViewRenderer = Depends(get_renderer),
    validator: FormValidator = Depends(get_form_validator),
) -> AuthorService:
    """Dependency for providing an AuthorService instance."""
    return AuthorService(store, renderer, validator)
