"""
Revenue and dashboard statistics.

Revenue counts only Completed appointments. Each appointment is worth the sum
of the unit prices of its services, looked up in the current price table;
services missing from the table are worth 0.
"""

import calendar
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Sequence

from manicurista.core.exceptions import ValidationError
from manicurista.domain.entities import Appointment, Client, Prices
from manicurista.services.calendar_service import WEEKDAY_LABELS, start_of_week, week_of

TODAY_LABEL = "Hoy"


class RevenueWindow(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def from_value(cls, value) -> "RevenueWindow":
        if isinstance(value, cls):
            return value
        for window in cls:
            if window.value == value:
                return window
        raise ValidationError(
            f"Window must be one of: {', '.join(w.value for w in cls)}",
            field="window",
        )


@dataclass
class RevenuePoint:
    label: str
    amount: float = 0.0


@dataclass
class RevenueSeries:
    window: RevenueWindow
    reference_date: date
    points: List[RevenuePoint] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(point.amount for point in self.points)


@dataclass
class DashboardSummary:
    revenue: RevenueSeries
    completed_count: int
    new_clients_count: int
    status_distribution: Dict[str, int]
    birthdays: List[Client]


def in_window(day: date, window: RevenueWindow, reference_date: date) -> bool:
    if window == RevenueWindow.DAY:
        return day == reference_date
    if window == RevenueWindow.WEEK:
        return start_of_week(day) == start_of_week(reference_date)
    return (day.year, day.month) == (reference_date.year, reference_date.month)


def revenue(
    appointments: Iterable[Appointment],
    prices: Prices,
    window,
    reference_date: date,
) -> RevenueSeries:
    """Revenue series for the day, week or month containing reference_date."""
    window = RevenueWindow.from_value(window)
    series = RevenueSeries(window=window, reference_date=reference_date)

    if window == RevenueWindow.DAY:
        series.points = [RevenuePoint(TODAY_LABEL)]
    elif window == RevenueWindow.WEEK:
        series.points = [RevenuePoint(label) for label in WEEKDAY_LABELS]
    else:
        days = calendar.monthrange(reference_date.year, reference_date.month)[1]
        series.points = [RevenuePoint(str(day)) for day in range(1, days + 1)]

    for appointment in appointments:
        if not appointment.is_completed:
            continue
        if not in_window(appointment.date, window, reference_date):
            continue

        if window == RevenueWindow.DAY:
            index = 0
        elif window == RevenueWindow.WEEK:
            index = (appointment.date.weekday() + 1) % 7
        else:
            # Bucketed by day-of-month number
            index = appointment.date.day - 1
        series.points[index].amount += appointment.price_with(prices)

    return series


def status_distribution(appointments: Iterable[Appointment]) -> Dict[str, int]:
    """Count per status, in order of first appearance; absent statuses omitted."""
    return dict(Counter(a.status.value for a in appointments))


def birthdays_in_week(clients: Iterable[Client], week_dates: Sequence[date]) -> List[Client]:
    """Clients whose birthday (month and day) falls on one of the week dates."""
    week_days = {(d.month, d.day) for d in week_dates}
    matching = [
        c
        for c in clients
        if c.birth_date is not None
        and (c.birth_date.month, c.birth_date.day) in week_days
    ]
    return sorted(matching, key=lambda c: (c.birth_date.month, c.birth_date.day))


def dashboard_summary(
    appointments: Iterable[Appointment],
    clients: Iterable[Client],
    prices: Prices,
    window,
    reference_date: date,
) -> DashboardSummary:
    appointments = list(appointments)
    clients = list(clients)
    return DashboardSummary(
        revenue=revenue(appointments, prices, window, reference_date),
        completed_count=sum(1 for a in appointments if a.is_completed),
        new_clients_count=sum(1 for c in clients if c.is_new),
        status_distribution=status_distribution(appointments),
        birthdays=birthdays_in_week(clients, week_of(reference_date)),
    )
