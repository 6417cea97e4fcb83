"""
Pet I/O models for API requests and responses.

``owner_id`` must be a positive integer but is not checked against existing
owners. ``age`` is free text; numeric JSON values are accepted and kept as text.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PetRead(BaseModel):
    """Schema for reading a pet from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int = Field(description="Id of the owning owner")
    name: str = Field(description="Pet name")
    breed: str = Field(description="Pet breed")
    age: str = Field(description="Pet age as free text")


class PetCreate(BaseModel):
    """Schema for creating a pet via the API."""

    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    owner_id: int = Field(gt=0, description="Id of the owning owner")
    name: str = Field(min_length=1, max_length=100, description="Pet name")
    breed: str = Field(min_length=1, max_length=100, description="Pet breed")
    age: str = Field(min_length=1, max_length=30, description="Pet age as free text (e.g. '3 years')")


class PetUpdate(PetCreate):
    """Schema for updating a pet via the API (full overwrite)."""
