"""
Unit tests for the bulk import normalizer.
"""

from datetime import date, datetime, time

import pytest

from manicurista.domain.entities import GUEST_CLIENT_NAME, AppointmentStatus
from manicurista.services.import_normalizer import (
    DEFAULT_IMPORT_TIME,
    UNSPECIFIED_SERVICE,
    normalize_row,
    normalize_rows,
    resolve_date,
    resolve_time,
)


class TestFieldCoercion:
    def test_full_row(self):
        row = normalize_row(
            {
                "clientName": "Ana",
                "service": "Manicure",
                "date": "2024-01-10",
                "time": "09:00",
                "status": "Confirmada",
            }
        )

        assert row.client_name == "Ana"
        assert row.services == ["Manicure"]
        assert row.date == date(2024, 1, 10)
        assert row.time == "09:00"
        assert row.status == AppointmentStatus.CONFIRMED

    def test_defaults_for_empty_row(self):
        row = normalize_row({})

        assert row.client_name == GUEST_CLIENT_NAME
        assert row.services == [UNSPECIFIED_SERVICE]
        assert row.date is None
        assert row.time == DEFAULT_IMPORT_TIME
        assert row.status == AppointmentStatus.PENDING

    def test_services_list_is_kept(self):
        row = normalize_row({"services": ["Tradicional", "Retoque"]})

        assert row.services == ["Tradicional", "Retoque"]

    def test_single_services_value_is_wrapped(self):
        row = normalize_row({"clientName": "Ana", "services": "Manicure", "date": "2024-01-10"})

        assert row.services == ["Manicure"]

    def test_guest_row_with_single_services_value_is_kept(self):
        row = normalize_row({"services": "Pedicure"})

        assert row.services == ["Pedicure"]
        assert not row.is_rejected

    def test_numeric_client_name_is_stringified(self):
        assert normalize_row({"clientName": 42.0}).client_name == "42"

    @pytest.mark.parametrize("status", ["confirmada", "Confirmed", "", 3, None])
    def test_non_canonical_status_becomes_pending(self, status):
        assert normalize_row({"status": status}).status == AppointmentStatus.PENDING

    def test_non_dict_row_is_treated_as_empty(self):
        row = normalize_row("not a row")

        assert row.client_name == GUEST_CLIENT_NAME
        assert row.is_rejected


class TestDates:
    def test_serial_date(self):
        # Day 1 is 1900-01-01
        assert resolve_date(1) == date(1900, 1, 1)
        assert resolve_date(45292) == date(2024, 1, 2)

    def test_float_serial_truncated(self):
        assert resolve_date(45292.75) == date(2024, 1, 2)

    def test_native_datetime(self):
        assert resolve_date(datetime(2024, 5, 1, 13, 45)) == date(2024, 5, 1)

    def test_iso_datetime_string(self):
        assert resolve_date("2024-05-01T10:00:00Z") == date(2024, 5, 1)

    @pytest.mark.parametrize("value", ["garbage", "", None, True, float("nan"), ["2024-01-01"]])
    def test_invalid_dates(self, value):
        assert resolve_date(value) is None


class TestTimes:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("9:00", "09:00"),
            ("09:00:00", "09:00"),
            (time(14, 5), "14:05"),
            (datetime(2024, 1, 1, 7, 30), "07:30"),
            (0.375, "09:00"),
            ("noon", DEFAULT_IMPORT_TIME),
            ("24:10", DEFAULT_IMPORT_TIME),
            (None, DEFAULT_IMPORT_TIME),
            (5, DEFAULT_IMPORT_TIME),
        ],
    )
    def test_resolve_time(self, value, expected):
        assert resolve_time(value) == expected


class TestRejection:
    def test_rejected_only_when_all_signals_missing(self):
        result = normalize_rows(
            [
                {},
                {"clientName": "Ana"},
                {"service": "Manicure"},
                {"date": "2024-01-10"},
                {"date": "garbage", "time": "10:00", "status": "Completada"},
            ]
        )

        assert result.rejected == [0, 4]
        assert [r.source_index for r in result.accepted] == [1, 2, 3]
        assert result.total == 5

    def test_sample_import_accepts_exactly_one(self):
        rows = [
            {
                "clientName": "Ana",
                "service": "Manicure",
                "date": "2024-01-10",
                "time": "09:00",
                "status": "Confirmada",
            },
            {},
        ]

        result = normalize_rows(rows)

        assert len(result.accepted) == 1
        assert result.accepted[0].to_domain().client_name == "Ana"

    def test_explicit_guest_row_without_service_or_date_is_rejected(self):
        result = normalize_rows([{"clientName": GUEST_CLIENT_NAME}])

        assert result.rejected == [0]
