"""Unit tests for attention date normalization."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from vet_clinic.core.database.dates import (
    CANONICAL_FORMAT,
    current_attention_date,
    format_attention_date,
    normalize_attention_date,
)
from vet_clinic.core.errors import InvalidDateError


class TestNormalizeAttentionDate:
    """Accepted input forms reduce to a naive datetime with whole seconds."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-03-05", datetime(2024, 3, 5, 0, 0, 0)),
            ("2024-03-05T14:30", datetime(2024, 3, 5, 14, 30, 0)),
            ("2024-03-05T14:30:15", datetime(2024, 3, 5, 14, 30, 15)),
            ("2024-03-05 14:30:15", datetime(2024, 3, 5, 14, 30, 15)),
            ("2024-03-05T14:30:15.987654", datetime(2024, 3, 5, 14, 30, 15)),
            ("  2024-03-05 08:00:00  ", datetime(2024, 3, 5, 8, 0, 0)),
        ],
    )
    def test_naive_strings(self, value, expected):
        assert normalize_attention_date(value) == expected

    def test_datetime_drops_microseconds(self):
        result = normalize_attention_date(datetime(2024, 1, 2, 3, 4, 5, 678901))
        assert result == datetime(2024, 1, 2, 3, 4, 5)
        assert result.microsecond == 0

    def test_date_means_midnight(self):
        assert normalize_attention_date(date(2024, 1, 2)) == datetime(2024, 1, 2)

    @pytest.mark.parametrize("value", ["2024-03-05T14:30:00Z", "2024-03-05T14:30:00+00:00"])
    def test_utc_strings_convert_to_local_time(self, value):
        expected = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

        result = normalize_attention_date(value)

        assert result == expected
        assert result.tzinfo is None

    def test_aware_datetime_converts_to_local_time(self):
        aware = datetime(2024, 3, 5, 14, 30, tzinfo=timezone(timedelta(hours=-5)))
        expected = aware.astimezone().replace(tzinfo=None)

        assert normalize_attention_date(aware) == expected

    @pytest.mark.parametrize("value", ["", "not a date", "2024-13-45", "05/03/2024", "2024-03-05T25:00"])
    def test_unparsable_strings_raise(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            normalize_attention_date(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [None, 20240305, 1.5, ["2024-03-05"]])
    def test_unsupported_types_raise(self, value):
        with pytest.raises(InvalidDateError):
            normalize_attention_date(value)


class TestFormatAttentionDate:
    def test_canonical_text(self):
        assert format_attention_date("2024-03-05T09:07:03.500") == "2024-03-05 09:07:03"

    def test_format_constant(self):
        assert datetime(2024, 3, 5, 9, 7, 3).strftime(CANONICAL_FORMAT) == "2024-03-05 09:07:03"


class TestCurrentAttentionDate:
    def test_uses_given_now(self):
        assert current_attention_date(datetime(2024, 3, 5, 9, 7, 3, 999)) == datetime(2024, 3, 5, 9, 7, 3)

    def test_defaults_to_now(self):
        before = datetime.now().replace(microsecond=0)
        result = current_attention_date()
        after = datetime.now()

        assert before <= result <= after
        assert result.microsecond == 0
