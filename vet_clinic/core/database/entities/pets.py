"""
Pet entity models.

This module contains the database entity for pets. ``owner_id`` holds the
owner's id as given by the caller; it is not checked against ``owners``.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class PetBase(Base):
    """Mutable fields of a pet."""

    owner_id: int = Field(index=True, description="Id of the owning owner (unvalidated)")
    name: str = Field(max_length=100, description="Pet name")
    breed: str = Field(max_length=100, description="Pet breed")
    age: str = Field(max_length=30, description="Pet age as free text (e.g. '3 years')")


class Pet(PetBase, table=True):
    """Persistent pet.

    Table: pets
    """

    __tablename__ = "pets"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Pet(id={self.id}, name={self.name}, owner_id={self.owner_id})"
