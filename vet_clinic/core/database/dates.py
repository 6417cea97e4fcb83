"""
Attention date normalization for medical records.

Medical record dates reach the store either as ``datetime``/``date`` objects or
as ISO-8601 strings such as ``"2024-03-05"``, ``"2024-03-05T14:30:00"``,
``"2024-03-05 14:30"`` or ``"2024-03-05T14:30:00Z"``. All of them are reduced to
one canonical value before storage: a naive local ``datetime`` truncated to
whole seconds, whose text form is ``YYYY-MM-DD HH:MM:SS``.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

from vet_clinic.core.errors import InvalidDateError

CANONICAL_FORMAT = "%Y-%m-%d %H:%M:%S"

DateInput = Union[datetime, date, str]


def _parse(value: str) -> datetime:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def normalize_attention_date(value: DateInput) -> datetime:
    """Reduce an accepted date input to its canonical stored value.

    Aware values are converted to local time. Sub-second precision is dropped.

    Args:
        value: A ``datetime``, a ``date`` (midnight is assumed) or an ISO-8601 string.

    Returns:
        Naive local ``datetime`` with ``microsecond == 0``.

    Raises:
        InvalidDateError: If the value is of another type or cannot be parsed.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, str):
        moment = _parse(value)
    else:
        raise InvalidDateError(value)

    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment.replace(microsecond=0)


def format_attention_date(value: DateInput) -> str:
    """Return the canonical ``YYYY-MM-DD HH:MM:SS`` text of a date input."""
    return normalize_attention_date(value).strftime(CANONICAL_FORMAT)


def current_attention_date(now: Optional[datetime] = None) -> datetime:
    """Canonical value for "now", used when a record is created without a date."""
    return normalize_attention_date(now or datetime.now())
