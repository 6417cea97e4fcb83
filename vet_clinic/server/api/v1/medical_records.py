"""
API endpoints for managing medical records.

Records are listed newest first. ``attention_date`` accepts ISO-8601 text and
is returned as ``YYYY-MM-DD HH:MM:SS``; an unparsable date is rejected with
400 before anything is written. The list endpoint accepts the search term as
either ``search`` or ``q``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, status

from vet_clinic.core.errors import NotFoundError
from vet_clinic.core.logging_config import get_logger
from vet_clinic.core.models.io import (
    DataResponse,
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
    MessageResponse,
    Page,
    PagedResponse,
    SearchResponse,
    StatsData,
    StatsResponse,
)
from vet_clinic.server.services.deps import RepositoriesDep

from .queries import clean_term, require_term

logger = get_logger(__name__)

router = APIRouter(tags=["medical-records"])


@router.get(
    "",
    response_model=PagedResponse[MedicalRecordRead],
    summary="List Medical Records",
    description="List medical records newest first, or every record matching `search` (or `q`).",
    response_description="A page of medical records with pagination metadata.",
)
async def list_medical_records(
    repos: RepositoriesDep,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    q: Optional[str] = None,
) -> PagedResponse[MedicalRecordRead]:
    """
    List medical records.

    ``search`` takes precedence over ``q`` when both are given. Matching covers
    the reason and diagnosis text.
    """
    term = clean_term(search) or clean_term(q)
    if term is not None:
        result = Page.single(await repos.medical_records.search_by_term(term))
    else:
        result = await repos.medical_records.paginate(page, limit)
    return PagedResponse[MedicalRecordRead](
        message="Medical records retrieved successfully",
        data=[MedicalRecordRead.model_validate(record) for record in result.items],
        pagination=result.pagination,
    )


@router.get(
    "/search",
    response_model=SearchResponse[MedicalRecordRead],
    summary="Search Medical Records",
    description="Case-insensitive substring search over reason and diagnosis.",
    responses={400: {"description": "Missing or blank search term"}},
)
async def search_medical_records(
    repos: RepositoriesDep, q: Optional[str] = None
) -> SearchResponse[MedicalRecordRead]:
    term = require_term(q)
    records = await repos.medical_records.search_by_term(term)
    return SearchResponse[MedicalRecordRead](
        message=f"Search results for '{term}'",
        data=[MedicalRecordRead.model_validate(record) for record in records],
        count=len(records),
    )


@router.get("/stats", response_model=StatsResponse, summary="Medical Record Statistics")
async def medical_record_stats(repos: RepositoriesDep) -> StatsResponse:
    total = await repos.medical_records.count()
    return StatsResponse(
        message="Medical record statistics retrieved successfully",
        data=StatsData(total=total, timestamp=datetime.now(timezone.utc)),
    )


@router.get(
    "/{record_id}",
    response_model=DataResponse[MedicalRecordRead],
    summary="Get Medical Record by ID",
    responses={404: {"description": "Medical record not found"}},
)
async def get_medical_record(record_id: int, repos: RepositoriesDep) -> DataResponse[MedicalRecordRead]:
    record = await repos.medical_records.find_by_id(record_id)
    if record is None:
        raise NotFoundError("medical record", record_id)
    return DataResponse[MedicalRecordRead](
        message="Medical record retrieved successfully",
        data=MedicalRecordRead.model_validate(record),
    )


@router.post(
    "",
    response_model=DataResponse[MedicalRecordRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Medical Record",
    description="Record a visit. A missing `attention_date` defaults to the current time.",
    responses={
        201: {"description": "Medical record created successfully"},
        400: {"description": "Invalid record data or attention date"},
    },
)
async def create_medical_record(
    payload: MedicalRecordCreate, repos: RepositoriesDep
) -> DataResponse[MedicalRecordRead]:
    record = await repos.medical_records.create(payload)
    logger.info(f"Medical record {record.id} created for pet {record.pet_id}")
    return DataResponse[MedicalRecordRead](
        message="Medical record created successfully",
        data=MedicalRecordRead.model_validate(record),
    )


@router.put(
    "/{record_id}",
    response_model=DataResponse[MedicalRecordRead],
    summary="Update Medical Record",
    description="Overwrite a record. A missing `attention_date` keeps the stored date.",
    responses={
        400: {"description": "Invalid record data or attention date"},
        404: {"description": "Medical record not found"},
    },
)
async def update_medical_record(
    record_id: int, payload: MedicalRecordUpdate, repos: RepositoriesDep
) -> DataResponse[MedicalRecordRead]:
    record = await repos.medical_records.update(record_id, payload)
    if record is None:
        raise NotFoundError("medical record", record_id)
    logger.info(f"Medical record {record_id} updated")
    return DataResponse[MedicalRecordRead](
        message="Medical record updated successfully",
        data=MedicalRecordRead.model_validate(record),
    )


@router.delete(
    "/{record_id}",
    response_model=MessageResponse,
    summary="Delete Medical Record",
    responses={404: {"description": "Medical record not found"}},
)
async def delete_medical_record(record_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.medical_records.delete(record_id):
        raise NotFoundError("medical record", record_id)
    logger.info(f"Medical record {record_id} deleted")
    return MessageResponse(message="Medical record deleted successfully")
