"""
Test factories for appointments, clients, products and collaborators.

These factories provide convenient ways to create test data with
sensible defaults; any field can be overridden with keyword arguments.
"""

from datetime import date
from itertools import count
from unittest.mock import Mock

from manicurista.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    Product,
)
from manicurista.domain.interfaces import ISpreadsheetReader, ITextGenerator
from manicurista.repositories import (
    AppointmentRepository,
    ClientRepository,
    InventoryRepository,
)
from manicurista.schemas.dtos import AppointmentCreateRequest
from manicurista.state import SalonState


def sequential_clock(start: int = 1_700_000_000_000):
    """Deterministic millisecond clock for AppointmentRepository."""
    ticks = count(start)
    return lambda: next(ticks)


class AppointmentFactory:
    """Factory for creating Appointment test objects."""

    @staticmethod
    def create_data(**kwargs):
        """
        Create appointment payload data (camelCase, as sent by the dashboard).

        Args:
            **kwargs: Override any default values

        Returns:
            dict: JSON-ready appointment payload
        """
        defaults = {
            "clientName": "Elena Rodriguez",
            "services": ["Semi-permanente"],
            "date": "2024-03-05",
            "time": "10:00",
            "status": AppointmentStatus.PENDING.value,
        }
        defaults.update(kwargs)
        return defaults

    @staticmethod
    def create_request(**kwargs) -> AppointmentCreateRequest:
        return AppointmentCreateRequest.from_payload(
            AppointmentFactory.create_data(**kwargs)
        )

    @staticmethod
    def create(**kwargs) -> Appointment:
        defaults = {
            "client_name": "Elena Rodriguez",
            "services": ["Semi-permanente"],
            "date": date(2024, 3, 5),
            "time": "10:00",
            "status": AppointmentStatus.PENDING,
        }
        defaults.update(kwargs)
        return Appointment(**defaults)

    @staticmethod
    def completed(**kwargs) -> Appointment:
        kwargs.setdefault("status", AppointmentStatus.COMPLETED)
        return AppointmentFactory.create(**kwargs)


class ClientFactory:
    """Factory for creating Client test objects."""

    @staticmethod
    def create_data(**kwargs):
        defaults = {
            "name": "Sofia Garcia",
            "phone": "555-0102",
            "email": "sofia.g@example.com",
            "birthDate": "1994-06-12",
            "serviceHistory": ["Acrílicas"],
            "preferences": "Le gustan los diseños florales.",
            "isNew": False,
        }
        defaults.update(kwargs)
        return defaults

    @staticmethod
    def create(**kwargs) -> Client:
        defaults = {
            "name": "Sofia Garcia",
            "phone": "555-0102",
            "email": "sofia.g@example.com",
            "birth_date": date(1994, 6, 12),
            "service_history": ["Acrílicas"],
            "preferences": "Le gustan los diseños florales.",
            "is_new": False,
        }
        defaults.update(kwargs)
        return Client(**defaults)


class ProductFactory:
    """Factory for creating Product test objects."""

    @staticmethod
    def create_data(**kwargs):
        defaults = {"name": "Top Coat Brillante", "currentStock": 4, "minStock": 5}
        defaults.update(kwargs)
        return defaults

    @staticmethod
    def create(**kwargs) -> Product:
        defaults = {"name": "Top Coat Brillante", "current_stock": 4, "min_stock": 5}
        defaults.update(kwargs)
        return Product(**defaults)


class TextGeneratorFactory:
    """Factory for text-generation collaborator mocks."""

    @staticmethod
    def create_mock(configured: bool = True, reply: str = "¡Hola! Mensaje generado.") -> Mock:
        mock = Mock(spec=ITextGenerator)
        mock.is_configured.return_value = configured
        mock.generate.return_value = reply
        return mock


class SpreadsheetReaderFactory:
    @staticmethod
    def create_mock(rows=None) -> Mock:
        mock = Mock(spec=ISpreadsheetReader)
        mock.read_rows.return_value = rows if rows is not None else []
        return mock


def build_state(
    appointments=None,
    clients=None,
    products=None,
    text_generator=None,
    spreadsheet_reader=None,
) -> SalonState:
    """Salon state with deterministic ids and mocked collaborators."""
    return SalonState(
        appointment_repo=AppointmentRepository(
            appointments or [], clock=sequential_clock()
        ),
        client_repo=ClientRepository(clients or []),
        inventory_repo=InventoryRepository(products or []),
        text_generator=text_generator or TextGeneratorFactory.create_mock(),
        spreadsheet_reader=spreadsheet_reader or SpreadsheetReaderFactory.create_mock(),
    )
