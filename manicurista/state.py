"""
Salon state container.

One SalonState per application instance owns the in-memory collections and
the services that mutate them. create_app stores it in
app.extensions["salon_state"] so controllers never touch module globals.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from flask import current_app

from manicurista.core.config import app_today
from manicurista.domain.entities import (
    GUEST_CLIENT_NAME,
    Appointment,
    AppointmentStatus,
    Client,
    Prices,
    Product,
    Profile,
)
from manicurista.domain.interfaces import ISpreadsheetReader, ITextGenerator
from manicurista.repositories import (
    AppointmentRepository,
    ClientRepository,
    GeminiTextGenerator,
    InventoryRepository,
)
from manicurista.services.appointment_service import AppointmentService
from manicurista.services.assistant_service import AssistantService
from manicurista.services.calendar_service import start_of_week
from manicurista.services.client_service import ClientService
from manicurista.services.inventory_service import InventoryService
from manicurista.services.marketing_service import MarketingService
from manicurista.services.settings_service import SettingsService
from manicurista.services.spreadsheet_reader import ExcelSpreadsheetReader

STATE_EXTENSION_KEY = "salon_state"

DEFAULT_PROFILE = Profile(salon_name="Manicurista Pro", owner_name="Ana Martínez")
DEFAULT_PRICES: Prices = {
    "Semi-permanente": 25.0,
    "Tradicional": 15.0,
    "Acrílicas": 40.0,
    "Retoque": 30.0,
}


@dataclass
class SalonState:
    appointment_repo: AppointmentRepository = field(default_factory=AppointmentRepository)
    client_repo: ClientRepository = field(default_factory=ClientRepository)
    inventory_repo: InventoryRepository = field(default_factory=InventoryRepository)
    settings_service: SettingsService = field(
        default_factory=lambda: SettingsService(DEFAULT_PROFILE, DEFAULT_PRICES)
    )
    text_generator: ITextGenerator = field(default_factory=GeminiTextGenerator)
    spreadsheet_reader: ISpreadsheetReader = field(default_factory=ExcelSpreadsheetReader)

    def __post_init__(self):
        self.appointment_service = AppointmentService(self.appointment_repo)
        self.client_service = ClientService(self.client_repo, self.appointment_repo)
        self.inventory_service = InventoryService(self.inventory_repo)
        self.marketing_service = MarketingService(
            self.text_generator,
            self.client_service,
            self.appointment_repo,
            self.settings_service,
        )
        self.assistant_service = AssistantService(
            self.text_generator,
            self.appointment_repo,
            self.client_repo,
            self.inventory_repo,
            self.settings_service,
        )


def _birthday_this_week(week_start: date, offset_from_sunday: int, years_ago: int) -> date:
    day = week_start + timedelta(days=offset_from_sunday)
    try:
        return day.replace(year=day.year - years_ago)
    except ValueError:
        # Feb 29 in a non-leap year
        return day.replace(year=day.year - years_ago, day=28)


def build_demo_state(
    today: Optional[date] = None,
    text_generator: Optional[ITextGenerator] = None,
    spreadsheet_reader: Optional[ISpreadsheetReader] = None,
) -> SalonState:
    """Demo salon with appointments and birthdays placed in the current week."""
    today = today or app_today()
    week_start = start_of_week(today)

    def day(offset: int) -> date:
        return week_start + timedelta(days=offset)

    clients = [
        Client(
            id=1,
            name="Elena Rodriguez",
            phone="555-0101",
            email="elena.r@example.com",
            birth_date=_birthday_this_week(week_start, 2, 30),
            service_history=["Semi-permanente", "Tradicional"],
            preferences="Prefiere tonos nude. Alergia al látex.",
        ),
        Client(
            id=2,
            name="Sofia Garcia",
            phone="555-0102",
            email="sofia.g@example.com",
            birth_date=date(1994, 6, 12),
            service_history=["Acrílicas"],
            preferences="Le gustan los diseños florales.",
        ),
        Client(
            id=3,
            name="Camila Hernandez",
            phone="555-0103",
            email="camila.h@example.com",
            birth_date=_birthday_this_week(week_start, 5, 25),
            service_history=["Tradicional"],
            preferences="No le gusta el color amarillo.",
            is_new=True,
        ),
        Client(
            id=4,
            name="Valentina Martinez",
            phone="555-0104",
            email="valentina.m@example.com",
            birth_date=date(1991, 9, 3),
            service_history=["Semi-permanente", "Tradicional", "Acrílicas"],
            preferences="Siempre pide extra brillo.",
        ),
        Client(
            id=5,
            name="Isabella Lopez",
            phone="555-0105",
            email="isabella.l@example.com",
            birth_date=date(2000, 1, 27),
            service_history=["Tradicional"],
            preferences="Sensible en los pies.",
            is_new=True,
        ),
    ]

    appointments = [
        Appointment(
            client_name="Elena Rodriguez",
            services=["Semi-permanente"],
            date=day(1),
            time="10:00",
            status=AppointmentStatus.CONFIRMED,
            id=1,
        ),
        Appointment(
            client_name="Sofia Garcia",
            services=["Acrílicas"],
            date=day(1),
            time="14:00",
            status=AppointmentStatus.PENDING,
            id=2,
        ),
        Appointment(
            client_name=GUEST_CLIENT_NAME,
            services=["Tradicional"],
            date=day(2),
            time="11:00",
            status=AppointmentStatus.COMPLETED,
            id=3,
        ),
        Appointment(
            client_name="Valentina Martinez",
            services=["Retoque"],
            date=day(4),
            time="16:00",
            status=AppointmentStatus.CANCELLED,
            id=4,
        ),
        Appointment(
            client_name="Isabella Lopez",
            services=["Semi-permanente"],
            date=day(4),
            time="10:00",
            status=AppointmentStatus.PENDING,
            id=5,
        ),
    ]

    products = [
        Product("Esmalte Rojo Pasión", 15, 5, id=1),
        Product("Esmalte Blanco Nieve", 8, 5, id=2),
        Product("Top Coat Brillante", 4, 5, id=3),
        Product("Base Coat Fortalecedora", 12, 5, id=4),
        Product("Aceite de Cutícula", 20, 10, id=5),
        Product("Crema Hidratante de Manos", 9, 10, id=6),
        Product("Removedor de Esmalte", 25, 10, id=7),
    ]

    return SalonState(
        appointment_repo=AppointmentRepository(appointments),
        client_repo=ClientRepository(clients),
        inventory_repo=InventoryRepository(products),
        text_generator=text_generator or GeminiTextGenerator(),
        spreadsheet_reader=spreadsheet_reader or ExcelSpreadsheetReader(),
    )


def get_state() -> SalonState:
    """State container of the current Flask application."""
    return current_app.extensions[STATE_EXTENSION_KEY]
