"""
API endpoints for managing pets.

``owner_id`` is stored as given; the owner is not looked up.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, status

from vet_clinic.core.errors import NotFoundError
from vet_clinic.core.logging_config import get_logger
from vet_clinic.core.models.io import (
    DataResponse,
    MessageResponse,
    Page,
    PagedResponse,
    PetCreate,
    PetRead,
    PetUpdate,
    SearchResponse,
    StatsData,
    StatsResponse,
)
from vet_clinic.server.services.deps import RepositoriesDep

from .queries import clean_term, require_term

logger = get_logger(__name__)

router = APIRouter(tags=["pets"])


@router.get(
    "",
    response_model=PagedResponse[PetRead],
    summary="List Pets",
    description="List pets one page at a time, or every pet matching `search` when it is given.",
    response_description="A page of pets with pagination metadata.",
)
async def list_pets(
    repos: RepositoriesDep,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
) -> PagedResponse[PetRead]:
    """
    List pets ordered by name.

    A non-blank ``search`` term matches name or breed and returns every match as one page.
    """
    term = clean_term(search)
    if term is not None:
        result = Page.single(await repos.pets.search_by_term(term))
    else:
        result = await repos.pets.paginate(page, limit)
    return PagedResponse[PetRead](
        message="Pets retrieved successfully",
        data=[PetRead.model_validate(pet) for pet in result.items],
        pagination=result.pagination,
    )


@router.get(
    "/search",
    response_model=SearchResponse[PetRead],
    summary="Search Pets",
    description="Case-insensitive substring search over name and breed.",
    responses={400: {"description": "Missing or blank search term"}},
)
async def search_pets(repos: RepositoriesDep, q: Optional[str] = None) -> SearchResponse[PetRead]:
    term = require_term(q)
    pets = await repos.pets.search_by_term(term)
    return SearchResponse[PetRead](
        message=f"Search results for '{term}'",
        data=[PetRead.model_validate(pet) for pet in pets],
        count=len(pets),
    )


@router.get("/stats", response_model=StatsResponse, summary="Pet Statistics")
async def pet_stats(repos: RepositoriesDep) -> StatsResponse:
    total = await repos.pets.count()
    return StatsResponse(
        message="Pet statistics retrieved successfully",
        data=StatsData(total=total, timestamp=datetime.now(timezone.utc)),
    )


@router.get(
    "/{pet_id}",
    response_model=DataResponse[PetRead],
    summary="Get Pet by ID",
    responses={404: {"description": "Pet not found"}},
)
async def get_pet(pet_id: int, repos: RepositoriesDep) -> DataResponse[PetRead]:
    pet = await repos.pets.find_by_id(pet_id)
    if pet is None:
        raise NotFoundError("pet", pet_id)
    return DataResponse[PetRead](message="Pet retrieved successfully", data=PetRead.model_validate(pet))


@router.post(
    "",
    response_model=DataResponse[PetRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Pet",
    responses={
        201: {"description": "Pet created successfully"},
        400: {"description": "Invalid pet data"},
    },
)
async def create_pet(payload: PetCreate, repos: RepositoriesDep) -> DataResponse[PetRead]:
    pet = await repos.pets.create(payload)
    logger.info(f"Pet {pet.id} created for owner {pet.owner_id}")
    return DataResponse[PetRead](message="Pet created successfully", data=PetRead.model_validate(pet))


@router.put(
    "/{pet_id}",
    response_model=DataResponse[PetRead],
    summary="Update Pet",
    responses={404: {"description": "Pet not found"}},
)
async def update_pet(pet_id: int, payload: PetUpdate, repos: RepositoriesDep) -> DataResponse[PetRead]:
    pet = await repos.pets.update(pet_id, payload)
    if pet is None:
        raise NotFoundError("pet", pet_id)
    logger.info(f"Pet {pet_id} updated")
    return DataResponse[PetRead](message="Pet updated successfully", data=PetRead.model_validate(pet))


@router.delete(
    "/{pet_id}",
    response_model=MessageResponse,
    summary="Delete Pet",
    description="Permanently delete a pet. Its medical records are left untouched.",
    responses={404: {"description": "Pet not found"}},
)
async def delete_pet(pet_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.pets.delete(pet_id):
        raise NotFoundError("pet", pet_id)
    logger.info(f"Pet {pet_id} deleted")
    return MessageResponse(message="Pet deleted successfully")
