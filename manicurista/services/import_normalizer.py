"""
Bulk import normalizer.

Turns loosely-typed spreadsheet rows into appointment drafts. Each field is
coerced independently with a fallback value, and a row is dropped only when
every signal is missing at once: guest client, unspecified service and an
unusable date.
"""

import math
import numbers
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional

from manicurista.domain.entities import (
    GUEST_CLIENT_NAME,
    Appointment,
    AppointmentStatus,
)
from manicurista.utils.datetime_utils import date_from_serial, normalize_time, parse_date

UNSPECIFIED_SERVICE = "No especificado"
DEFAULT_IMPORT_TIME = "12:00"

# Column names expected in the uploaded sheet (case-sensitive)
EXPECTED_COLUMNS = ("clientName", "service", "date", "time", "status")


@dataclass
class NormalizedRow:
    """A spreadsheet row after coercion, before it becomes an Appointment."""

    client_name: str
    services: List[str]
    date: Optional[date]
    time: str
    status: AppointmentStatus
    source_index: int = 0

    @property
    def has_valid_date(self) -> bool:
        return self.date is not None

    @property
    def is_rejected(self) -> bool:
        return (
            self.client_name == GUEST_CLIENT_NAME
            and self.services == [UNSPECIFIED_SERVICE]
            and not self.has_valid_date
        )

    def to_domain(self) -> Appointment:
        return Appointment(
            client_name=self.client_name,
            services=list(self.services),
            date=self.date,
            time=self.time,
            status=self.status,
        )


@dataclass
class NormalizationResult:
    accepted: List[NormalizedRow] = field(default_factory=list)
    rejected: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.accepted) + len(self.rejected)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _stringify(value: Any) -> str:
    # Spreadsheet readers hand back whole numbers as floats
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def resolve_date(value: Any) -> Optional[date]:
    """Accept a native date, an ISO string, or a spreadsheet day serial."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return parse_date(value)
    if isinstance(value, numbers.Real):
        if math.isnan(value) or math.isinf(value):
            return None
        return date_from_serial(value)
    if isinstance(value, str):
        return parse_date(value)
    return None


def resolve_status(value: Any) -> AppointmentStatus:
    if isinstance(value, str) and value in AppointmentStatus.values():
        return AppointmentStatus.from_value(value)
    return AppointmentStatus.PENDING


def resolve_client_name(value: Any) -> str:
    if _is_blank(value):
        return GUEST_CLIENT_NAME
    return _stringify(value) or GUEST_CLIENT_NAME


def resolve_services(row: Dict[str, Any]) -> List[str]:
    raw = row.get("services")
    if isinstance(raw, (list, tuple)):
        services = [_stringify(s) for s in raw if not _is_blank(s)]
        if services:
            return services
    elif not _is_blank(raw):
        return [_stringify(raw)]
    raw = row.get("service")
    if _is_blank(raw):
        return [UNSPECIFIED_SERVICE]
    return [_stringify(raw)]


def resolve_time(value: Any) -> str:
    if _is_blank(value):
        return DEFAULT_IMPORT_TIME
    if isinstance(value, (datetime, time)):
        return normalize_time(value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        # Spreadsheet clock times are fractions of a day
        if 0 <= value < 1:
            minutes = int(round(value * 24 * 60)) % (24 * 60)
            return f"{minutes // 60:02d}:{minutes % 60:02d}"
        return DEFAULT_IMPORT_TIME
    return normalize_time(_stringify(value)) or DEFAULT_IMPORT_TIME


def normalize_row(row: Any, source_index: int = 0) -> NormalizedRow:
    """Coerce a single row; non-dict rows are treated as empty."""
    if not isinstance(row, dict):
        row = {}
    return NormalizedRow(
        client_name=resolve_client_name(row.get("clientName")),
        services=resolve_services(row),
        date=resolve_date(row.get("date")),
        time=resolve_time(row.get("time")),
        status=resolve_status(row.get("status")),
        source_index=source_index,
    )


def normalize_rows(rows: Iterable[Any]) -> NormalizationResult:
    """Split rows into accepted drafts and rejected source indexes."""
    result = NormalizationResult()
    for index, row in enumerate(rows):
        normalized = normalize_row(row, source_index=index)
        if normalized.is_rejected:
            result.rejected.append(index)
        else:
            result.accepted.append(normalized)
    return result
