"""
Owner I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas for the owner endpoints.
The create/update schemas enforce required, non-blank, length-bounded fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class OwnerRead(BaseModel):
    """Schema for reading an owner from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str = Field(description="Owner first name")
    last_name: str = Field(description="Owner last name(s)")
    national_id: str = Field(description="National identity document number")
    phone: str = Field(description="Contact phone number")
    email: str = Field(description="Contact email address")


class OwnerCreate(BaseModel):
    """Schema for creating an owner via the API."""

    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    first_name: str = Field(min_length=1, max_length=100, description="Owner first name")
    last_name: str = Field(min_length=1, max_length=100, description="Owner last name(s)")
    national_id: str = Field(min_length=1, max_length=30, description="National identity document number")
    phone: str = Field(min_length=1, max_length=30, description="Contact phone number")
    email: str = Field(max_length=150, pattern=EMAIL_PATTERN, description="Contact email address")


class OwnerUpdate(OwnerCreate):
    """Schema for updating an owner via the API.

    Updates overwrite every mutable field, so all fields remain required.
    """
