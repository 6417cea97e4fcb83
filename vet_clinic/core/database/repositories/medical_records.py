"""
Medical record repository.

Records are listed newest first by attention date. Search matches the reason
and diagnosis columns.

Attention dates are normalized before every write (see
``vet_clinic.core.database.dates``); an unparsable value raises
``InvalidDateError`` before the store is touched. A record created without a
date is stamped with the current time, and an update without a date keeps the
stored one.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vet_clinic.core.logging_config import get_logger

from ..dates import current_attention_date, normalize_attention_date
from ..entities.medical_records import MedicalRecord
from .base import AsyncBaseRepository, FieldsInput

logger = get_logger(__name__)


class MedicalRecordRepository(AsyncBaseRepository[MedicalRecord]):
    """Repository for medical record data access operations."""

    entity_name = "medical record"
    collection_name = "medical records"
    mutable_fields = ("pet_id", "attention_date", "reason", "diagnosis")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, MedicalRecord)

    def ordering(self) -> Tuple[Any, ...]:
        return (MedicalRecord.attention_date.desc(), MedicalRecord.id.desc())

    def search_columns(self) -> Tuple[Any, ...]:
        return (MedicalRecord.reason, MedicalRecord.diagnosis)

    async def create(self, fields: FieldsInput) -> MedicalRecord:
        """Insert a new record, stamping it with the current time when no date is given.

        Raises:
            InvalidDateError: If ``attention_date`` cannot be parsed (nothing is written)
        """
        values = self._values(fields)
        if values["attention_date"] is None:
            values["attention_date"] = current_attention_date()
        else:
            values["attention_date"] = normalize_attention_date(values["attention_date"])
        return await super().create(values)

    async def update(self, entity_id: Union[str, int], fields: FieldsInput) -> Optional[MedicalRecord]:
        """Overwrite a record, keeping its stored attention date when none is given.

        Returns:
            The re-read record, or None if no record matched

        Raises:
            InvalidDateError: If ``attention_date`` cannot be parsed (nothing is written)
        """
        values: Dict[str, Any] = self._values(fields)
        if values["attention_date"] is None:
            existing = await self.find_by_id(entity_id)
            if existing is None:
                return None
            logger.debug(f"Keeping stored attention date of medical record {existing.id}")
            values["attention_date"] = existing.attention_date
        else:
            values["attention_date"] = normalize_attention_date(values["attention_date"])
        return await super().update(entity_id, values)
