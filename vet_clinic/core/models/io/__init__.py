"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts. The ``*Create`` and
``*Update`` schemas double as the validation layer: a repository is only
called with payloads that passed them.

Modules:
- owners: Owner I/O models
- pets: Pet I/O models
- medical_records: Medical record I/O models
- pagination: Pagination metadata and the generic page of items
- envelopes: Response envelopes shared by every router
"""

from .envelopes import (
    DataResponse,
    ErrorResponse,
    MessageResponse,
    PagedResponse,
    SearchResponse,
    StatsData,
    StatsResponse,
)
from .medical_records import (
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
)
from .owners import (
    OwnerCreate,
    OwnerRead,
    OwnerUpdate,
)
from .pagination import Page, PaginationInfo
from .pets import (
    PetCreate,
    PetRead,
    PetUpdate,
)

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "MedicalRecordCreate",
    "MedicalRecordRead",
    "MedicalRecordUpdate",
    "MessageResponse",
    "OwnerCreate",
    "OwnerRead",
    "OwnerUpdate",
    "Page",
    "PagedResponse",
    "PaginationInfo",
    "PetCreate",
    "PetRead",
    "PetUpdate",
    "SearchResponse",
    "StatsData",
    "StatsResponse",
]
