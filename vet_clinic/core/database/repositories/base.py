"""
Base repository and query utilities.

This module provides the repository contract shared by the owner, pet and
medical record stores. A concrete repository only declares its entity class,
its canonical ordering, its two searchable text columns and its mutable fields;
lookup, listing, create, update, delete, search, count and pagination are
implemented once here.

Transaction model
-----------------

Each repository method opens an ``AsyncSession`` from the session factory it
was given, performs its operation and commits. The session is released on
every exit path. Create and update re-read the row in a second session, so the
write and the re-read are not atomic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, ClassVar, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import delete as sa_delete
from sqlalchemy import func, or_, select
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from vet_clinic.core.errors import DuplicateEntryError, NotFoundError, StorageError
from vet_clinic.core.logging_config import get_logger
from vet_clinic.core.models.io.pagination import Page

from ..pagination import DEFAULT_LIMIT, DEFAULT_PAGE, build_pagination_info, resolve_page_bounds

logger = get_logger(__name__)

EntityType = TypeVar("EntityType", bound=SQLModel)

FieldsInput = Union[BaseModel, Mapping[str, Any]]


class QueryBuilder:
    """Utility class for building repository select statements."""

    @staticmethod
    def apply_search(stmt, columns: Tuple[Any, ...], term: str):
        """Restrict a select statement to rows where any column contains ``term``.

        Matching is a case-insensitive substring match (``ILIKE '%term%'``).

        Args:
            stmt: Select statement
            columns: Text columns to match against
            term: Substring to look for

        Returns:
            Modified select statement with the search condition applied
        """
        pattern = f"%{term}%"
        return stmt.where(or_(*(column.ilike(pattern) for column in columns)))

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Both bounds are rendered as bound parameters.

        Args:
            stmt: Select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


def _is_duplicate_entry(exc: IntegrityError) -> bool:
    """Whether an integrity error is a unique-constraint violation (vs. NOT NULL, CHECK, ...)."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == "23505" or getattr(orig, "pgcode", None) == "23505":
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == 1062:  # MySQL ER_DUP_ENTRY
        return True
    message = str(orig).lower()
    return "unique" in message or "duplicate" in message


def _coerce_id(entity_id: Union[str, int]) -> Optional[int]:
    """Return ``entity_id`` as an ``int``, or ``None`` if it cannot name a row."""
    if isinstance(entity_id, bool):
        return None
    try:
        return int(entity_id)
    except (TypeError, ValueError):
        return None


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository implementing the shared store contract."""

    #: Entity name used in log lines and error messages (e.g. ``"owner"``).
    entity_name: ClassVar[str]
    #: Plural form used in operation tags (e.g. ``"owners"``).
    collection_name: ClassVar[str]
    #: Fields overwritten by ``create``/``update``.
    mutable_fields: ClassVar[Tuple[str, ...]]

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: Type[EntityType]) -> None:
        """Initialize repository with a session factory and SQLModel entity class.

        Args:
            session_factory: Pooled async session factory; one session is opened per operation
            model: SQLModel entity class for this repository
        """
        self.session_factory = session_factory
        self.model = model

    @abstractmethod
    def ordering(self) -> Tuple[Any, ...]:
        """Canonical ``ORDER BY`` clauses used by listing, search and pagination."""

    @abstractmethod
    def search_columns(self) -> Tuple[Any, ...]:
        """The two text columns matched by ``search_by_term``."""

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Surface driver/ORM failures as repository errors tagged with ``operation``."""
        try:
            yield
        except IntegrityError as exc:
            if _is_duplicate_entry(exc):
                logger.error(f"Duplicate entry during '{operation}': {exc}")
                raise DuplicateEntryError(operation, exc) from exc
            logger.error(f"Integrity failure during '{operation}': {exc}", exc_info=True)
            raise StorageError(operation, exc) from exc
        except SQLAlchemyError as exc:
            logger.error(f"Storage failure during '{operation}': {exc}", exc_info=True)
            raise StorageError(operation, exc) from exc

    def _values(self, fields: FieldsInput) -> Dict[str, Any]:
        """Pick the mutable fields out of a payload (Pydantic model or mapping)."""
        data = fields.model_dump() if isinstance(fields, BaseModel) else dict(fields)
        return {name: data.get(name) for name in self.mutable_fields}

    def _select(self):
        return select(self.model).order_by(*self.ordering())

    async def find_by_id(self, entity_id: Union[str, int]) -> Optional[EntityType]:
        """Get an entity by its primary key.

        Args:
            entity_id: Primary key value (int or numeric string)

        Returns:
            Entity instance or None if not found
        """
        key = _coerce_id(entity_id)
        if key is None:
            return None
        with self._translate_errors(f"find {self.entity_name} by id"):
            async with self.session_factory() as session:
                stmt = select(self.model).where(self.model.id == key)
                result = await session.execute(stmt)
                return result.scalar_one_or_none()

    async def find_all(self) -> List[EntityType]:
        """List every entity in canonical order."""
        with self._translate_errors(f"list {self.collection_name}"):
            async with self.session_factory() as session:
                result = await session.execute(self._select())
                return list(result.scalars().all())

    async def create(self, fields: FieldsInput) -> EntityType:
        """Insert a new row and return it as re-read from the store.

        Args:
            fields: Payload holding the mutable fields

        Returns:
            The stored entity with its generated id

        Raises:
            NotFoundError: If the row vanished before it could be re-read
            DuplicateEntryError: If a unique constraint rejected the insert
            StorageError: For any other storage failure
        """
        entity = self.model(**self._values(fields))
        with self._translate_errors(f"create {self.entity_name}"):
            async with self.session_factory() as session:
                session.add(entity)
                await session.commit()
                new_id = entity.id

        logger.debug(f"Created {self.entity_name} {new_id}")
        created = await self.find_by_id(new_id)
        if created is None:
            logger.warning(f"{self.entity_name} {new_id} disappeared between insert and re-read")
            raise NotFoundError(self.entity_name, new_id)
        return created

    async def update(self, entity_id: Union[str, int], fields: FieldsInput) -> Optional[EntityType]:
        """Overwrite the mutable fields of an existing row.

        No row is inserted when ``entity_id`` does not match.

        Args:
            entity_id: Primary key value
            fields: Payload holding the mutable fields

        Returns:
            The re-read entity, or None if no row matched
        """
        key = _coerce_id(entity_id)
        if key is None:
            return None
        values = self._values(fields)
        with self._translate_errors(f"update {self.entity_name}"):
            async with self.session_factory() as session:
                stmt = sa_update(self.model).where(self.model.id == key).values(**values)
                result = await session.execute(stmt)
                await session.commit()
                if result.rowcount == 0:
                    return None

        logger.debug(f"Updated {self.entity_name} {key}")
        return await self.find_by_id(key)

    async def delete(self, entity_id: Union[str, int]) -> bool:
        """Delete an entity by its primary key.

        Args:
            entity_id: Primary key value

        Returns:
            True if a row was removed, False if none matched
        """
        key = _coerce_id(entity_id)
        if key is None:
            return False
        with self._translate_errors(f"delete {self.entity_name}"):
            async with self.session_factory() as session:
                result = await session.execute(sa_delete(self.model).where(self.model.id == key))
                await session.commit()
                deleted = result.rowcount > 0

        if deleted:
            logger.debug(f"Deleted {self.entity_name} {key}")
        return deleted

    async def search_by_term(self, term: str) -> List[EntityType]:
        """Case-insensitive substring search over the entity's two text columns.

        Blank terms are expected to be rejected by the caller.

        Args:
            term: Substring to look for

        Returns:
            Matching entities in canonical order
        """
        with self._translate_errors(f"search {self.collection_name}"):
            async with self.session_factory() as session:
                stmt = QueryBuilder.apply_search(self._select(), self.search_columns(), term)
                result = await session.execute(stmt)
                return list(result.scalars().all())

    async def count(self) -> int:
        """Total number of rows in the store."""
        with self._translate_errors(f"count {self.collection_name}"):
            async with self.session_factory() as session:
                result = await session.execute(select(func.count()).select_from(self.model))
                return int(result.scalar_one())

    async def paginate(self, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> Page:
        """Return one page of entities in canonical order.

        ``page`` and ``limit`` are coerced and clamped by ``resolve_page_bounds``.
        An offset past the end yields no items with consistent metadata.

        Args:
            page: Requested page number
            limit: Requested page size

        Returns:
            Page holding the items and their pagination metadata
        """
        bounds = resolve_page_bounds(page, limit)
        with self._translate_errors(f"paginate {self.collection_name}"):
            async with self.session_factory() as session:
                stmt = QueryBuilder.apply_pagination(self._select(), bounds.limit, bounds.offset)
                result = await session.execute(stmt)
                items = list(result.scalars().all())
                total_result = await session.execute(select(func.count()).select_from(self.model))
                total = int(total_result.scalar_one())

        return Page(items=items, pagination=build_pagination_info(bounds, total))
