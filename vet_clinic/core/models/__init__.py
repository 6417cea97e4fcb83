"""Core models and schemas for the clinic HTTP contract."""

from __future__ import annotations

from .io import (
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
    OwnerCreate,
    OwnerRead,
    OwnerUpdate,
    Page,
    PaginationInfo,
    PetCreate,
    PetRead,
    PetUpdate,
)

__all__ = [
    "MedicalRecordCreate",
    "MedicalRecordRead",
    "MedicalRecordUpdate",
    "OwnerCreate",
    "OwnerRead",
    "OwnerUpdate",
    "Page",
    "PaginationInfo",
    "PetCreate",
    "PetRead",
    "PetUpdate",
]
