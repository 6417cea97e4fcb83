"""
Response envelopes shared by every router.

Successful responses carry ``success=True``, a human-readable ``message`` and
the payload under ``data``; listings add ``pagination`` and searches add
``count``. Failures carry ``success=False``, ``message`` and ``error``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from .pagination import PaginationInfo

DataType = TypeVar("DataType")


class MessageResponse(BaseModel):
    """Envelope without payload (e.g. after a delete)."""

    success: bool = True
    message: str


class DataResponse(MessageResponse, Generic[DataType]):
    """Envelope carrying a single entity."""

    data: DataType


class PagedResponse(MessageResponse, Generic[DataType]):
    """Envelope carrying one page of entities."""

    data: List[DataType]
    pagination: PaginationInfo


class SearchResponse(MessageResponse, Generic[DataType]):
    """Envelope carrying search matches."""

    data: List[DataType]
    count: int


class StatsData(BaseModel):
    """Row count of one store at a point in time."""

    total: int = Field(ge=0)
    timestamp: datetime


class StatsResponse(MessageResponse):
    """Envelope carrying store statistics."""

    data: StatsData


class ErrorResponse(BaseModel):
    """Envelope returned for every failure."""

    success: bool = False
    message: str
    error: Optional[str] = None
    errors: Optional[List[Any]] = None
