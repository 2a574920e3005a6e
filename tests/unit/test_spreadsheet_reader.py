"""
Unit tests for the pandas/openpyxl spreadsheet reader.
"""

import io
from datetime import datetime

import pytest
from openpyxl import Workbook

from manicurista.core.exceptions import ImportFormatError
from manicurista.services.import_normalizer import normalize_rows
from manicurista.services.spreadsheet_reader import ExcelSpreadsheetReader


def workbook_bytes(rows, sheets=None):
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    for title, extra_rows in (sheets or {}).items():
        extra = workbook.create_sheet(title)
        for row in extra_rows:
            extra.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def reader():
    return ExcelSpreadsheetReader()


def test_reads_first_sheet_keyed_by_header(reader):
    content = workbook_bytes(
        [
            ["clientName", "service", "date", "time", "status"],
            ["Ana", "Manicure", datetime(2024, 1, 10), "09:00", "Confirmada"],
        ],
        sheets={"Other": [["clientName"], ["Ignored"]]},
    )

    rows = reader.read_rows(content)

    assert len(rows) == 1
    assert rows[0]["clientName"] == "Ana"
    assert rows[0]["service"] == "Manicure"
    assert rows[0]["date"] == datetime(2024, 1, 10)
    assert rows[0]["status"] == "Confirmada"


def test_empty_cells_are_left_out(reader):
    content = workbook_bytes(
        [
            ["clientName", "service", "date"],
            ["Ana", None, "2024-01-10"],
        ]
    )

    rows = reader.read_rows(content)

    assert rows == [{"clientName": "Ana", "date": "2024-01-10"}]


def test_rows_feed_the_normalizer(reader):
    content = workbook_bytes(
        [
            ["clientName", "service", "date", "time", "status"],
            ["Ana", "Manicure", datetime(2024, 1, 10), "09:00", "Confirmada"],
            ["Bea", "Pedicure", datetime(2024, 1, 11), "9:30", "Pendiente"],
        ]
    )

    result = normalize_rows(reader.read_rows(content))

    assert [r.client_name for r in result.accepted] == ["Ana", "Bea"]
    assert result.accepted[1].time == "09:30"


def test_unreadable_file_raises_import_error(reader):
    with pytest.raises(ImportFormatError):
        reader.read_rows(b"this is not a workbook")


def test_empty_content_raises_import_error(reader):
    with pytest.raises(ImportFormatError):
        reader.read_rows(b"")
