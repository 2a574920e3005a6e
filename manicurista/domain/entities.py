"""
Domain entities - Pure business logic, no framework dependencies.

Each entity represents one salon concept and validates its own invariants
in __post_init__, independent of HTTP handling or storage.
"""

from dataclasses import dataclass, field
from datetime import date as Date
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from manicurista.utils.datetime_utils import normalize_time

GUEST_CLIENT_NAME = "Invitado"


class AppointmentStatus(str, Enum):
    """Appointment lifecycle states, valued by the labels shown to the salon."""

    PENDING = "Pendiente"
    CONFIRMED = "Confirmada"
    COMPLETED = "Completada"
    CANCELLED = "Cancelada"

    @classmethod
    def from_value(cls, value) -> "AppointmentStatus":
        """Resolve an exact canonical label (or enum member) to a status."""
        if isinstance(value, cls):
            return value
        for status in cls:
            if status.value == value:
                return status
        raise ValueError(f"Invalid status: {value!r}")

    @classmethod
    def values(cls) -> List[str]:
        return [status.value for status in cls]


@dataclass
class Appointment:
    """Domain entity for a scheduled service booking."""

    client_name: str = ""
    services: List[str] = field(default_factory=list)
    date: Optional[Date] = None
    time: str = ""
    status: AppointmentStatus = AppointmentStatus.PENDING
    id: Optional[int] = None

    def __post_init__(self):
        """Validate business rules."""
        if not self.client_name or not str(self.client_name).strip():
            raise ValueError("Client name is required")
        self.client_name = str(self.client_name).strip()
        self.services = [
            str(s).strip()
            for s in (self.services or [])
            if s is not None and str(s).strip()
        ]
        if not self.services:
            raise ValueError("At least one service is required")
        if isinstance(self.date, datetime):
            self.date = self.date.date()
        if not isinstance(self.date, Date):
            raise ValueError("A valid date is required")
        normalized = normalize_time(self.time)
        if normalized is None:
            raise ValueError("A valid time (HH:MM) is required")
        self.time = normalized
        self.status = AppointmentStatus.from_value(self.status)

    @property
    def is_completed(self) -> bool:
        return self.status == AppointmentStatus.COMPLETED

    def price_with(self, prices: Dict[str, float]) -> float:
        """Sum of the unit prices of every service; unknown services count as 0."""
        return sum(float(prices.get(service, 0) or 0) for service in self.services)


@dataclass
class Client:
    """Domain entity representing a salon client."""

    name: str = ""
    phone: str = ""
    email: str = ""
    birth_date: Optional[Date] = None
    service_history: List[str] = field(default_factory=list)
    preferences: str = ""
    is_new: bool = False
    id: Optional[int] = None

    def __post_init__(self):
        """Validate business rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Name is required")
        if self.email and "@" not in self.email:
            raise ValueError("Invalid email format")
        self.service_history = list(self.service_history or [])


@dataclass
class Product:
    """Domain entity for inventory management."""

    name: str = ""
    current_stock: int = 0
    min_stock: int = 0
    id: Optional[int] = None

    def __post_init__(self):
        """Validate business rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Product name is required")
        if self.current_stock < 0:
            raise ValueError("Stock cannot be negative")
        if self.min_stock < 0:
            raise ValueError("Minimum stock cannot be negative")

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock <= self.min_stock


@dataclass
class Profile:
    """Salon display name and owner name."""

    salon_name: str = ""
    owner_name: str = ""

    def __post_init__(self):
        self.salon_name = (self.salon_name or "").strip()
        self.owner_name = (self.owner_name or "").strip()
        if not self.salon_name:
            raise ValueError("Salon name is required")
        if not self.owner_name:
            raise ValueError("Owner name is required")


# Service name -> unit price. Keys are the service options offered for booking.
Prices = Dict[str, float]
