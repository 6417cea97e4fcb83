"""
Medical record entity models.

This module contains the database entity for a pet's visit history.
``attention_date`` is stored as a naive local DATETIME with second precision;
see ``vet_clinic.core.database.dates`` for the accepted input forms.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base

REASON_MAX_LENGTH = 500
DIAGNOSIS_MAX_LENGTH = 2000


class MedicalRecordBase(Base):
    """Mutable fields of a medical record."""

    pet_id: int = Field(index=True, description="Id of the attended pet (unvalidated)")
    attention_date: datetime = Field(index=True, description="Date and time of the visit")
    reason: str = Field(max_length=REASON_MAX_LENGTH, description="Reason for the visit")
    diagnosis: str = Field(max_length=DIAGNOSIS_MAX_LENGTH, description="Diagnosis given")


class MedicalRecord(MedicalRecordBase, table=True):
    """Persistent medical record.

    Table: medical_records
    """

    __tablename__ = "medical_records"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"MedicalRecord(id={self.id}, pet_id={self.pet_id}, attention_date={self.attention_date})"
