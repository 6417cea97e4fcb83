"""
API endpoints for managing clinic owners.

Provides listing (paginated or filtered by a search term), search, statistics
and CRUD operations over the owner store. Repository errors are rendered by
the registered exception handlers.
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
    OwnerCreate,
    OwnerRead,
    OwnerUpdate,
    Page,
    PagedResponse,
    SearchResponse,
    StatsData,
    StatsResponse,
)
from vet_clinic.server.services.deps import RepositoriesDep

from .queries import clean_term, require_term

logger = get_logger(__name__)

router = APIRouter(tags=["owners"])


@router.get(
    "",
    response_model=PagedResponse[OwnerRead],
    summary="List Owners",
    description="List owners one page at a time, or every owner matching `search` when it is given.",
    response_description="A page of owners with pagination metadata.",
)
async def list_owners(
    repos: RepositoriesDep,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
) -> PagedResponse[OwnerRead]:
    """
    List owners.

    Without a search term the owners are paginated in first name, last name
    order. ``page`` and ``limit`` are lenient: missing or non-numeric values
    fall back to 1 and 10, and ``limit`` is capped at 100. With a search term
    every match is returned as a single page.
    """
    term = clean_term(search)
    if term is not None:
        result = Page.single(await repos.owners.search_by_term(term))
    else:
        result = await repos.owners.paginate(page, limit)
    return PagedResponse[OwnerRead](
        message="Owners retrieved successfully",
        data=[OwnerRead.model_validate(owner) for owner in result.items],
        pagination=result.pagination,
    )


@router.get(
    "/search",
    response_model=SearchResponse[OwnerRead],
    summary="Search Owners",
    description="Case-insensitive substring search over first and last names.",
    responses={400: {"description": "Missing or blank search term"}},
)
async def search_owners(repos: RepositoriesDep, q: Optional[str] = None) -> SearchResponse[OwnerRead]:
    term = require_term(q)
    owners = await repos.owners.search_by_term(term)
    return SearchResponse[OwnerRead](
        message=f"Search results for '{term}'",
        data=[OwnerRead.model_validate(owner) for owner in owners],
        count=len(owners),
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Owner Statistics",
    description="Total number of registered owners.",
)
async def owner_stats(repos: RepositoriesDep) -> StatsResponse:
    total = await repos.owners.count()
    return StatsResponse(
        message="Owner statistics retrieved successfully",
        data=StatsData(total=total, timestamp=datetime.now(timezone.utc)),
    )


@router.get(
    "/{owner_id}",
    response_model=DataResponse[OwnerRead],
    summary="Get Owner by ID",
    responses={404: {"description": "Owner not found"}},
)
async def get_owner(owner_id: int, repos: RepositoriesDep) -> DataResponse[OwnerRead]:
    owner = await repos.owners.find_by_id(owner_id)
    if owner is None:
        raise NotFoundError("owner", owner_id)
    return DataResponse[OwnerRead](message="Owner retrieved successfully", data=OwnerRead.model_validate(owner))


@router.post(
    "",
    response_model=DataResponse[OwnerRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Owner",
    description="Register a new owner. Every field is required.",
    responses={
        201: {"description": "Owner created successfully"},
        400: {"description": "Invalid owner data"},
        409: {"description": "Duplicate owner"},
    },
)
async def create_owner(payload: OwnerCreate, repos: RepositoriesDep) -> DataResponse[OwnerRead]:
    owner = await repos.owners.create(payload)
    logger.info(f"Owner {owner.id} created")
    return DataResponse[OwnerRead](message="Owner created successfully", data=OwnerRead.model_validate(owner))


@router.put(
    "/{owner_id}",
    response_model=DataResponse[OwnerRead],
    summary="Update Owner",
    description="Overwrite every field of an existing owner.",
    responses={404: {"description": "Owner not found"}},
)
async def update_owner(owner_id: int, payload: OwnerUpdate, repos: RepositoriesDep) -> DataResponse[OwnerRead]:
    owner = await repos.owners.update(owner_id, payload)
    if owner is None:
        raise NotFoundError("owner", owner_id)
    logger.info(f"Owner {owner_id} updated")
    return DataResponse[OwnerRead](message="Owner updated successfully", data=OwnerRead.model_validate(owner))


@router.delete(
    "/{owner_id}",
    response_model=MessageResponse,
    summary="Delete Owner",
    description="Permanently delete an owner. Their pets are left untouched.",
    responses={404: {"description": "Owner not found"}},
)
async def delete_owner(owner_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.owners.delete(owner_id):
        raise NotFoundError("owner", owner_id)
    logger.info(f"Owner {owner_id} deleted")
    return MessageResponse(message="Owner deleted successfully")
