"""
Medical record I/O models for API requests and responses.

``attention_date`` is optional on input: the repository defaults it to the
current time on create and keeps the stored value on update. It is always
rendered in the canonical ``YYYY-MM-DD HH:MM:SS`` form.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from vet_clinic.core.database.dates import format_attention_date
from vet_clinic.core.database.entities.medical_records import (
    DIAGNOSIS_MAX_LENGTH,
    REASON_MAX_LENGTH,
)


class MedicalRecordRead(BaseModel):
    """Schema for reading a medical record from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    pet_id: int = Field(description="Id of the attended pet")
    attention_date: datetime = Field(description="Date and time of the visit")
    reason: str = Field(description="Reason for the visit")
    diagnosis: str = Field(description="Diagnosis given")

    @field_serializer("attention_date")
    def _serialize_attention_date(self, value: datetime) -> str:
        return format_attention_date(value)


class MedicalRecordCreate(BaseModel):
    """Schema for creating a medical record via the API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    pet_id: int = Field(gt=0, description="Id of the attended pet")
    attention_date: Optional[Union[datetime, str]] = Field(
        default=None,
        description="Visit date/time (ISO-8601); defaults to now",
    )
    reason: str = Field(min_length=1, max_length=REASON_MAX_LENGTH, description="Reason for the visit")
    diagnosis: str = Field(min_length=1, max_length=DIAGNOSIS_MAX_LENGTH, description="Diagnosis given")


class MedicalRecordUpdate(MedicalRecordCreate):
    """Schema for updating a medical record via the API.

    Omitting ``attention_date`` keeps the stored value.
    """
