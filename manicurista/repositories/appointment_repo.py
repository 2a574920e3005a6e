"""
In-memory appointment repository: the canonical appointment collection.

The collection is kept sorted ascending by (date, time) after every write.
Python's sort is stable, so appointments sharing a (date, time) keep their
relative order in the collection. Readers always receive copies.
"""

import time
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Sequence

from manicurista.core.exceptions import NotFoundError
from manicurista.domain.entities import Appointment
from manicurista.domain.interfaces import IAppointmentRepository
from manicurista.utils.datetime_utils import chronological_key


def _millisecond_clock() -> int:
    return time.time_ns() // 1_000_000


class AppointmentRepository(IAppointmentRepository):
    """Repository holding appointments for the lifetime of the process."""

    def __init__(
        self,
        appointments: Optional[Iterable[Appointment]] = None,
        clock: Callable[[], int] = _millisecond_clock,
    ) -> None:
        self._clock = clock
        self._items: List[Appointment] = []
        self._last_id = 0
        for appointment in appointments or []:
            if appointment.id is None:
                appointment = replace(appointment, id=self._next_id())
            self._last_id = max(self._last_id, appointment.id)
            self._items.append(replace(appointment))
        self._sort()

    def _next_id(self) -> int:
        """Clock-based id, bumped past the last one issued so ids never repeat."""
        candidate = self._clock()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _sort(self) -> None:
        self._items.sort(key=chronological_key)

    def _index_of(self, appointment_id: int) -> Optional[int]:
        for index, appointment in enumerate(self._items):
            if appointment.id == appointment_id:
                return index
        return None

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        index = self._index_of(appointment_id)
        return replace(self._items[index]) if index is not None else None

    def list_all(self) -> List[Appointment]:
        return [replace(appointment) for appointment in self._items]

    def create(self, appointment: Appointment) -> Appointment:
        stored = replace(appointment, id=self._next_id())
        self._items.insert(0, stored)
        self._sort()
        return replace(stored)

    def create_many(self, appointments: Sequence[Appointment]) -> List[Appointment]:
        stored = [replace(a, id=self._next_id()) for a in appointments]
        self._items = stored + self._items
        self._sort()
        return [replace(a) for a in stored]

    def update(self, appointment: Appointment) -> Appointment:
        index = self._index_of(appointment.id)
        if index is None:
            raise NotFoundError("Appointment", appointment.id)
        self._items[index] = replace(appointment)
        self._sort()
        return replace(appointment)

    def delete(self, appointment_id: int) -> bool:
        index = self._index_of(appointment_id)
        if index is None:
            return False
        del self._items[index]
        return True
