"""Document store over the catalog collections.

Controllers talk to the ``DocumentStore`` protocol only. ``SqlDocumentStore``
implements it with one FastCRUD object per collection and opens a fresh
session for every operation, so reads issued with ``asyncio.gather`` never
share a session.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Type

from fastcrud import FastCRUD
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...infrastructure.logging import get_logger
from .constants import EntityKind
from .exceptions import ResourceExistsError, ResourceNotFoundError

logger = get_logger(__name__)

Doc = Dict[str, Any]


class DocumentStore(Protocol):
    """Operations the catalog controllers need from persistence."""

    async def find_all(self, kind: EntityKind, sort: Optional[str] = None) -> List[Doc]: ...

    async def find_by_id(self, kind: EntityKind, entity_id: int) -> Optional[Doc]: ...

    async def find_by_fields(self, kind: EntityKind, fields: Mapping[str, Any]) -> Optional[Doc]: ...

    async def find_many(
        self, kind: EntityKind, filters: Mapping[str, Any], projection: Optional[Type[BaseModel]] = None
    ) -> List[Doc]: ...

    async def insert(self, kind: EntityKind, doc: BaseModel) -> Doc: ...

    async def update_by_id(self, kind: EntityKind, entity_id: int, doc: Mapping[str, Any]) -> Doc: ...

    async def delete_by_id(self, kind: EntityKind, entity_id: int) -> None: ...


class SqlDocumentStore:
    """FastCRUD-backed document store.

    Args:
        session_factory: Factory producing a new AsyncSession per operation
        collections: FastCRUD object for each entity kind
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        collections: Mapping[EntityKind, FastCRUD],
    ):
        self._session_factory = session_factory
        self._collections = dict(collections)

    def _crud(self, kind: EntityKind) -> FastCRUD:
        try:
            return self._collections[kind]
        except KeyError:
            raise ValueError(f"No collection registered for {kind.value}") from None

    async def find_all(self, kind: EntityKind, sort: Optional[str] = None) -> List[Doc]:
        """Fetch every document of a kind, optionally sorted ascending by one column."""
        crud = self._crud(kind)
        if sort:
            stmt = await crud.select(sort_columns=sort, sort_orders="asc")
        else:
            stmt = await crud.select()

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [dict(row._mapping) for row in result.all()]

    async def find_by_id(self, kind: EntityKind, entity_id: int) -> Optional[Doc]:
        return await self.find_by_fields(kind, {"id": entity_id})

    async def find_by_fields(self, kind: EntityKind, fields: Mapping[str, Any]) -> Optional[Doc]:
        """Fetch the first document whose columns equal ``fields``."""
        async with self._session_factory() as session:
            return await self._crud(kind).get(db=session, **fields)

    async def find_many(
        self, kind: EntityKind, filters: Mapping[str, Any], projection: Optional[Type[BaseModel]] = None
    ) -> List[Doc]:
        """Fetch all documents matching ``filters``, limited to the projection's fields."""
        stmt = await self._crud(kind).select(schema_to_select=projection, **filters)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [dict(row._mapping) for row in result.all()]

    async def insert(self, kind: EntityKind, doc: BaseModel) -> Doc:
        """Insert a document and return it with its generated identifier.

        Raises:
            ResourceExistsError: The document violates a uniqueness constraint
        """
        async with self._session_factory() as session:
            try:
                created = await self._crud(kind).create(db=session, object=doc)
            except IntegrityError as exc:
                await session.rollback()
                logger.debug(f"{kind.value} insert rejected by constraint", extra={"error": str(exc.orig)})
                raise ResourceExistsError(f"{kind.value} already exists") from exc

            entity_id = created.id

        inserted = await self.find_by_id(kind, entity_id)
        if inserted is None:
            raise ResourceNotFoundError(f"{kind.value} {entity_id} disappeared after insert")
        return inserted

    async def update_by_id(self, kind: EntityKind, entity_id: int, doc: Mapping[str, Any]) -> Doc:
        """Overwrite the fields of one document, keeping its identifier.

        Raises:
            ResourceNotFoundError: No document has this identifier
            ResourceExistsError: The new values violate a uniqueness constraint
        """
        values = {key: value for key, value in doc.items() if key != "id"}

        async with self._session_factory() as session:
            try:
                await self._crud(kind).update(db=session, object=values, id=entity_id)
            except NoResultFound:
                raise ResourceNotFoundError(f"{kind.value} {entity_id} not found") from None
            except IntegrityError as exc:
                await session.rollback()
                raise ResourceExistsError(f"Another {kind.value.lower()} already has these values") from exc

        updated = await self.find_by_id(kind, entity_id)
        if updated is None:
            raise ResourceNotFoundError(f"{kind.value} {entity_id} not found")
        return updated

    async def delete_by_id(self, kind: EntityKind, entity_id: int) -> None:
        """Remove one document permanently.

        Raises:
            ResourceNotFoundError: No document has this identifier
        """
        async with self._session_factory() as session:
            try:
                await self._crud(kind).delete(db=session, id=entity_id)
            except NoResultFound:
                raise ResourceNotFoundError(f"{kind.value} {entity_id} not found") from None
