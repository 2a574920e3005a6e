"""
Pytest markers and collection rules for the Manicurista Pro test suite.

Markers are registered here and attached automatically from the test file
location, so a single module can be selected with e.g. ``-m revenue``.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "appointment: mark test as appointment-related")
    config.addinivalue_line("markers", "calendar: mark test as calendar aggregation test")
    config.addinivalue_line("markers", "revenue: mark test as revenue/dashboard test")
    config.addinivalue_line("markers", "import_: mark test as bulk import test")
    config.addinivalue_line("markers", "clients: mark test as client-related")
    config.addinivalue_line("markers", "inventory: mark test as inventory-related")
    config.addinivalue_line(
        "markers", "marketing: mark test as text-generation (marketing/assistant) test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test items during collection."""
    for item in items:
        path = str(item.path)

        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "controller" in path:
            item.add_marker(pytest.mark.controllers)

        if "service" in path:
            item.add_marker(pytest.mark.services)

        if "repo" in path:
            item.add_marker(pytest.mark.repositories)

        if "appointment" in path:
            item.add_marker(pytest.mark.appointment)

        if "calendar" in path:
            item.add_marker(pytest.mark.calendar)

        if "revenue" in path or "dashboard" in path:
            item.add_marker(pytest.mark.revenue)

        if "import" in path or "spreadsheet" in path:
            item.add_marker(pytest.mark.import_)

        if "client" in path:
            item.add_marker(pytest.mark.clients)

        if "inventory" in path:
            item.add_marker(pytest.mark.inventory)

        if any(key in path for key in ("marketing", "assistant", "gemini")):
            item.add_marker(pytest.mark.marketing)
