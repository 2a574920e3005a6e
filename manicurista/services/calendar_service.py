"""
Calendar aggregations over the appointment collection.

Pure functions: inputs are never mutated and every call recomputes from the
collection it is given.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence, Union

from manicurista.core.exceptions import ValidationError
from manicurista.domain.entities import Appointment, AppointmentStatus
from manicurista.utils.client_utils import same_client_name
from manicurista.utils.datetime_utils import chronological_key, normalize_time

WEEKDAY_LABELS = ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb")
HISTORY_ALL = "All"


@dataclass
class DayBucket:
    date: date
    label: str
    appointments: List[Appointment] = field(default_factory=list)


def start_of_week(reference_date: date) -> date:
    """Sunday on or before the reference date."""
    return reference_date - timedelta(days=(reference_date.weekday() + 1) % 7)


def week_of(reference_date: date) -> List[date]:
    """The seven dates (Sunday..Saturday) of the week containing reference_date."""
    start = start_of_week(reference_date)
    return [start + timedelta(days=offset) for offset in range(7)]


def _time_key(appointment: Appointment) -> str:
    return normalize_time(appointment.time) or appointment.time


def bucket_by_day(
    appointments: Iterable[Appointment], week_dates: Sequence[date]
) -> List[DayBucket]:
    """Group appointments under each of the given dates, ordered by time."""
    appointments = list(appointments)
    buckets = []
    for day in week_dates:
        on_day = [a for a in appointments if a.date == day]
        buckets.append(
            DayBucket(
                date=day,
                label=WEEKDAY_LABELS[(day.weekday() + 1) % 7],
                appointments=sorted(on_day, key=_time_key),
            )
        )
    return buckets


def upcoming(appointments: Iterable[Appointment], today: date) -> List[Appointment]:
    """Appointments dated today or later; the time of day is not considered."""
    return sorted(
        (a for a in appointments if a.date >= today), key=chronological_key
    )


def _resolve_history_filter(
    status_filter: Union[str, AppointmentStatus, None]
) -> Optional[AppointmentStatus]:
    if status_filter is None or status_filter == HISTORY_ALL:
        return None
    try:
        return AppointmentStatus.from_value(status_filter)
    except ValueError:
        raise ValidationError(
            f"Status filter must be '{HISTORY_ALL}' or one of: "
            f"{', '.join(AppointmentStatus.values())}",
            field="status",
        )


def history(
    appointments: Iterable[Appointment],
    status_filter: Union[str, AppointmentStatus, None] = AppointmentStatus.COMPLETED,
) -> List[Appointment]:
    """Appointments matching the filter, most recent first.

    Pass "All" (or None) to include every status.
    """
    status = _resolve_history_filter(status_filter)
    matching = [a for a in appointments if status is None or a.status == status]
    return sorted(matching, key=chronological_key, reverse=True)


def next_appointment_for(
    appointments: Iterable[Appointment], client_name: str, today: date
) -> Optional[Appointment]:
    for appointment in upcoming(appointments, today):
        if same_client_name(appointment.client_name, client_name):
            return appointment
    return None
