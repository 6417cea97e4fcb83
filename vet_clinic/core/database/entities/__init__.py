"""
Database entity models.

Each module maps one table of the clinic database:

- owners: Pet owners and their contact details
- pets: Pets, each referencing an owner by id
- medical_records: Visit records, each referencing a pet by id

Foreign key values are stored verbatim; no database-level constraint ties a
pet to an existing owner or a record to an existing pet.
"""

from .medical_records import MedicalRecord, MedicalRecordBase
from .owners import Owner, OwnerBase
from .pets import Pet, PetBase

__all__ = [
    "MedicalRecord",
    "MedicalRecordBase",
    "Owner",
    "OwnerBase",
    "Pet",
    "PetBase",
]
