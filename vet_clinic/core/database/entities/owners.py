"""
Owner entity models.

This module contains the database entity for pet owners.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class OwnerBase(Base):
    """Mutable fields of an owner."""

    first_name: str = Field(max_length=100, description="Owner first name")
    last_name: str = Field(max_length=100, description="Owner last name(s)")
    national_id: str = Field(max_length=30, description="National identity document number")
    phone: str = Field(max_length=30, description="Contact phone number")
    email: str = Field(max_length=150, description="Contact email address")


class Owner(OwnerBase, table=True):
    """Persistent pet owner.

    Table: owners
    """

    __tablename__ = "owners"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Owner(id={self.id}, name={self.first_name} {self.last_name})"
