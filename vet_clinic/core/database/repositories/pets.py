"""
Pet repository.

Pets are listed by name. Search matches the name and breed columns.
``owner_id`` is written as given; the owner is not looked up.
"""

from __future__ import annotations

from typing import Any, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..entities.pets import Pet
from .base import AsyncBaseRepository


class PetRepository(AsyncBaseRepository[Pet]):
    """Repository for pet data access operations."""

    entity_name = "pet"
    collection_name = "pets"
    mutable_fields = ("owner_id", "name", "breed", "age")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Pet)

    def ordering(self) -> Tuple[Any, ...]:
        return (Pet.name, Pet.id)

    def search_columns(self) -> Tuple[Any, ...]:
        return (Pet.name, Pet.breed)
