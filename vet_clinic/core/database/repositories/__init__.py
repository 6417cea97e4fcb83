"""
Database repository layer.

One repository per clinic store, all built on ``AsyncBaseRepository`` which
implements the shared contract: ``find_by_id``, ``find_all``, ``create``,
``update``, ``delete``, ``search_by_term``, ``count`` and ``paginate``.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- owners: Owner repository
- pets: Pet repository
- medical_records: Medical record repository (adds date normalization)
"""

from .base import AsyncBaseRepository, QueryBuilder
from .medical_records import MedicalRecordRepository
from .owners import OwnerRepository
from .pets import PetRepository

__all__ = [
    "AsyncBaseRepository",
    "MedicalRecordRepository",
    "OwnerRepository",
    "PetRepository",
    "QueryBuilder",
]
