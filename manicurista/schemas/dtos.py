"""
Data Transfer Objects (DTOs) and validation schemas.

Request DTOs are built from JSON payloads (camelCase keys, as used by the
dashboard) and validate themselves before any service mutates state.
Response DTOs convert domain entities to JSON-ready dicts.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from manicurista.core.exceptions import ValidationError
from manicurista.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    Product,
    Profile,
)
from manicurista.utils.datetime_utils import normalize_time, parse_date

MESSAGE_TYPES = ("reminder", "promotion", "birthday")


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _services_from(data: Dict[str, Any]) -> List[str]:
    raw = _pick(data, "services", "service", default=[])
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        return []
    return [str(s).strip() for s in raw if s is not None and str(s).strip()]


def _int_field(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer", field=field_name)
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be a whole number", field=field_name)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer", field=field_name)


@dataclass
class AppointmentCreateRequest:
    """DTO for appointment creation requests. Every field is required."""

    client_name: str
    services: List[str]
    date: Optional[date]
    time: Optional[str]
    status: Any

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "AppointmentCreateRequest":
        return cls(
            client_name=str(_pick(data, "clientName", "client_name", default="")).strip(),
            services=_services_from(data),
            date=parse_date(data.get("date")),
            time=normalize_time(data.get("time")),
            status=data.get("status"),
        )

    def validate(self) -> None:
        """Validate the request data."""
        if not self.client_name or not self.client_name.strip():
            raise ValidationError("Client name is required", field="clientName")
        if not self.services:
            raise ValidationError("At least one service is required", field="services")
        if not isinstance(self.date, date):
            raise ValidationError("A valid date (YYYY-MM-DD) is required", field="date")
        if normalize_time(self.time) is None:
            raise ValidationError("A valid time (HH:MM) is required", field="time")
        if self.status is None or (
            not isinstance(self.status, AppointmentStatus)
            and self.status not in AppointmentStatus.values()
        ):
            raise ValidationError(
                f"Status must be one of: {', '.join(AppointmentStatus.values())}",
                field="status",
            )

    def to_domain(self, appointment_id: Optional[int] = None) -> Appointment:
        return Appointment(
            id=appointment_id,
            client_name=self.client_name,
            services=list(self.services),
            date=self.date,
            time=self.time,
            status=AppointmentStatus.from_value(self.status),
        )


@dataclass
class AppointmentUpdateRequest(AppointmentCreateRequest):
    """DTO for appointment updates: a full replacement of the mutable fields."""

    pass


@dataclass
class AppointmentResponse:
    """DTO for appointment API responses."""

    id: int
    client_name: str
    services: List[str]
    date: date
    time: str
    status: str

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentResponse":
        """Create response from domain entity."""
        return cls(
            id=appointment.id,
            client_name=appointment.client_name,
            services=list(appointment.services),
            date=appointment.date,
            time=appointment.time,
            status=appointment.status.value,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "clientName": self.client_name,
            "services": self.services,
            "date": self.date.isoformat(),
            "time": self.time,
            "status": self.status,
        }


@dataclass
class ClientRequest:
    """DTO for client create/update requests."""

    name: str
    phone: str = ""
    email: str = ""
    birth_date: Optional[date] = None
    service_history: List[str] = field(default_factory=list)
    preferences: str = ""
    is_new: bool = False
    raw_birth_date: Any = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ClientRequest":
        raw_birth_date = _pick(data, "birthDate", "birth_date")
        history = _pick(data, "serviceHistory", "service_history", default=[])
        return cls(
            name=str(data.get("name") or "").strip(),
            phone=str(data.get("phone") or "").strip(),
            email=str(data.get("email") or "").strip(),
            birth_date=parse_date(raw_birth_date),
            service_history=[str(s) for s in history] if isinstance(history, list) else [],
            preferences=str(data.get("preferences") or ""),
            is_new=bool(_pick(data, "isNew", "is_new", default=False)),
            raw_birth_date=raw_birth_date,
        )

    def validate(self) -> None:
        """Validate the request data."""
        if not self.name:
            raise ValidationError("Name is required", field="name")
        if self.email and "@" not in self.email:
            raise ValidationError("Invalid email format", field="email")
        if self.raw_birth_date not in (None, "") and self.birth_date is None:
            raise ValidationError("Birth date must be YYYY-MM-DD", field="birthDate")

    def to_domain(self, client_id: Optional[int] = None) -> Client:
        return Client(
            id=client_id,
            name=self.name,
            phone=self.phone,
            email=self.email,
            birth_date=self.birth_date,
            service_history=list(self.service_history),
            preferences=self.preferences,
            is_new=self.is_new,
        )


def client_to_dict(client: Client) -> Dict[str, Any]:
    return {
        "id": client.id,
        "name": client.name,
        "phone": client.phone,
        "email": client.email,
        "birthDate": client.birth_date.isoformat() if client.birth_date else None,
        "serviceHistory": list(client.service_history),
        "preferences": client.preferences,
        "isNew": client.is_new,
    }


@dataclass
class ProductRequest:
    """DTO for inventory product create/update requests."""

    name: str
    current_stock: int
    min_stock: int

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ProductRequest":
        return cls(
            name=str(data.get("name") or "").strip(),
            current_stock=_int_field(
                _pick(data, "currentStock", "current_stock", default=0), "currentStock"
            ),
            min_stock=_int_field(
                _pick(data, "minStock", "min_stock", default=0), "minStock"
            ),
        )

    def validate(self) -> None:
        """Validate the request data."""
        if not self.name:
            raise ValidationError("Product name is required", field="name")
        if self.current_stock < 0:
            raise ValidationError("Stock cannot be negative", field="currentStock")
        if self.min_stock < 0:
            raise ValidationError("Minimum stock cannot be negative", field="minStock")

    def to_domain(self, product_id: Optional[int] = None) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            current_stock=self.current_stock,
            min_stock=self.min_stock,
        )


def product_to_dict(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "currentStock": product.current_stock,
        "minStock": product.min_stock,
        "isLowStock": product.is_low_stock,
    }


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return {"salonName": profile.salon_name, "ownerName": profile.owner_name}


@dataclass
class MarketingMessageRequest:
    """DTO for marketing message generation."""

    message_type: str
    client_id: Optional[int]
    promotion: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MarketingMessageRequest":
        raw_client_id = _pick(data, "clientId", "client_id")
        return cls(
            message_type=str(_pick(data, "type", "messageType", default="")).strip(),
            client_id=(
                _int_field(raw_client_id, "clientId") if raw_client_id is not None else None
            ),
            promotion=data.get("promotion"),
        )

    def validate(self) -> None:
        """Validate the request data."""
        if self.message_type not in MESSAGE_TYPES:
            raise ValidationError(
                f"Message type must be one of: {', '.join(MESSAGE_TYPES)}",
                field="type",
            )
        if self.client_id is None:
            raise ValidationError("Por favor, selecciona un cliente.", field="clientId")
        if self.message_type == "promotion" and not (self.promotion or "").strip():
            raise ValidationError(
                "Por favor, introduce el texto de la promoción.", field="promotion"
            )


@dataclass
class ErrorResponse:
    """DTO for error responses."""

    error: str
    message: str
    details: Optional[dict] = None

    @classmethod
    def validation_error(
        cls, message: str, details: Optional[dict] = None
    ) -> "ErrorResponse":
        """Create validation error response."""
        return cls(error="validation_error", message=message, details=details)

    @classmethod
    def not_found(cls, resource: str) -> "ErrorResponse":
        """Create not found error response."""
        return cls(error="not_found", message=f"{resource} not found")

    @classmethod
    def import_error(cls, message: str) -> "ErrorResponse":
        """Create import format error response."""
        return cls(error="import_error", message=message)

    @classmethod
    def server_error(cls, message: str = "Internal server error") -> "ErrorResponse":
        """Create server error response."""
        return cls(error="server_error", message=message)
