"""
Owner repository.

Owners are listed by first name, then last name. Search matches the first
and last name columns.
"""

from __future__ import annotations

from typing import Any, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..entities.owners import Owner
from .base import AsyncBaseRepository


class OwnerRepository(AsyncBaseRepository[Owner]):
    """Repository for owner data access operations."""

    entity_name = "owner"
    collection_name = "owners"
    mutable_fields = ("first_name", "last_name", "national_id", "phone", "email")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Owner)

    def ordering(self) -> Tuple[Any, ...]:
        return (Owner.first_name, Owner.last_name, Owner.id)

    def search_columns(self) -> Tuple[Any, ...]:
        return (Owner.first_name, Owner.last_name)
