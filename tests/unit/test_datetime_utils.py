from datetime import date, datetime, time

import pytest

from manicurista.utils.client_utils import normalize_display_name, same_client_name
from manicurista.utils.datetime_utils import (
    date_from_serial,
    normalize_time,
    parse_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-05", date(2024, 3, 5)),
        (" 2024-03-05 ", date(2024, 3, 5)),
        (datetime(2024, 3, 5, 10, 0), date(2024, 3, 5)),
        (date(2024, 3, 5), date(2024, 3, 5)),
        ("05/03/2024", None),
        ("", None),
        (None, None),
        (20240305, None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("9:00", "09:00"),
        ("23:59", "23:59"),
        ("7:05:30", "07:05"),
        (time(8, 15), "08:15"),
        ("24:00", None),
        ("12:60", None),
        ("9am", None),
        (930, None),
    ],
)
def test_normalize_time(value, expected):
    assert normalize_time(value) == expected


def test_padded_times_sort_chronologically():
    times = [normalize_time(t) for t in ["10:00", "9:30", "14:05", "8:00"]]

    assert sorted(times) == ["08:00", "09:30", "10:00", "14:05"]


def test_date_from_serial():
    assert date_from_serial(2) == date(1900, 1, 2)
    assert date_from_serial(10**9) is None


def test_display_name_matching():
    assert normalize_display_name("  Elena   Rodriguez ") == "Elena Rodriguez"
    assert same_client_name("Camila Hernández", "Camila  Hernández")
    assert not same_client_name("Camila", "camila")
