"""Helpers shared by the author and genre lifecycle services."""

import asyncio
from typing import Any, List, Mapping, Optional, Protocol, Tuple, Type

from fastapi import status
from fastapi.responses import RedirectResponse, Response
from pydantic import BaseModel

from ...infrastructure.logging import get_logger
from .constants import EntityKind
from .exceptions import ResourceExistsError, ValidationError
from .store import Doc, DocumentStore

logger = get_logger(__name__)


class ViewRenderer(Protocol):
    """Turns a template name and its data into a response."""

    def render(self, template_name: str, data: Mapping[str, Any], status_code: int = 200) -> Response: ...


def redirect(url: str) -> RedirectResponse:
    """Redirect after a form submission so the browser follows up with a GET."""
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


async def fetch_with_dependents(
    store: DocumentStore,
    kind: EntityKind,
    entity_id: int,
    foreign_key: str,
    projection: Type[BaseModel],
) -> Tuple[Optional[Doc], List[Doc]]:
    """Fetch an entity and the books referencing it concurrently.

    Args:
        store: Document store
        kind: Kind of the referenced entity
        entity_id: Identifier of the referenced entity
        foreign_key: Book column holding the reference
        projection: Fields to load for each dependent book

    Returns:
        The entity (or None) and its dependents, possibly empty
    """
    entity, dependents = await asyncio.gather(
        store.find_by_id(kind, entity_id),
        store.find_many(EntityKind.BOOK, {foreign_key: entity_id}, projection),
    )
    return entity, dependents


async def insert_unless_exists(
    store: DocumentStore,
    kind: EntityKind,
    candidate: BaseModel,
    natural_key: Mapping[str, Any],
) -> Tuple[Doc, bool]:
    """Insert ``candidate`` unless a document with the same natural key exists.

    The store's unique constraint settles concurrent creates: the loser of
    the race reads back the winner instead of failing.

    Returns:
        The stored document and whether it was created by this call
    """
    existing = await store.find_by_fields(kind, natural_key)
    if existing is not None:
        logger.debug(f"{kind.value} already exists", extra={"entity_id": existing["id"]})
        return existing, False

    try:
        return await store.insert(kind, candidate), True
    except ResourceExistsError:
        existing = await store.find_by_fields(kind, natural_key)
        if existing is None:
            raise
        logger.info(f"{kind.value} created concurrently, reusing it", extra={"entity_id": existing["id"]})
        return existing, False


def is_blocked_by_dependents(dependents: List[Any]) -> bool:
    """Whether a delete has to be refused because books still reference the entity."""
    return len(dependents) > 0


def submitted_id(form: Mapping[str, Any], field: str, route_id: int) -> int:
    """Read the identifier a delete form submitted and check it against the route.

    Raises:
        ValidationError: The field is missing, not an integer, or names a
            different entity than the one checked for dependents
    """
    raw = str(form.get(field) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"Field '{field}' must be an identifier") from None

    if value != route_id:
        raise ValidationError(f"Field '{field}' does not match the requested entity")
    return value
