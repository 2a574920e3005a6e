from datetime import date

import pytest

from manicurista.main import create_app
from manicurista.services import calendar_service, revenue_service
from manicurista.state import build_demo_state
from tests.factories.test_factories import (
    AppointmentFactory,
    SpreadsheetReaderFactory,
    TextGeneratorFactory,
)

TODAY = date(2024, 3, 6)


@pytest.fixture
def demo():
    return build_demo_state(
        today=TODAY,
        text_generator=TextGeneratorFactory.create_mock(),
        spreadsheet_reader=SpreadsheetReaderFactory.create_mock(),
    )


def test_demo_appointments_fall_in_current_week(demo):
    week = calendar_service.week_of(TODAY)
    appointments = demo.appointment_service.list_appointments()

    assert len(appointments) == 5
    assert all(a.date in week for a in appointments)
    assert [a.id for a in appointments] == [1, 2, 3, 5, 4]


def test_demo_birthdays_this_week(demo):
    birthdays = revenue_service.birthdays_in_week(
        demo.client_service.list_clients(), calendar_service.week_of(TODAY)
    )

    assert [c.id for c in birthdays] == [1, 3]


def test_demo_inventory(demo):
    assert len(demo.inventory_service.list_products()) == 7
    assert [p.name for p in demo.inventory_service.low_stock()] == [
        "Top Coat Brillante",
        "Crema Hidratante de Manos",
    ]


def test_new_appointment_ids_continue_after_seed(demo):
    created = demo.appointment_service.create_appointment(AppointmentFactory.create_request())

    assert created.id > 5


def test_app_serves_injected_state(demo):
    app = create_app(testing=True, state=demo)

    response = app.test_client().get("/health")

    assert response.get_json()["appointments"] == 5
    assert response.get_json()["clients"] == 5
