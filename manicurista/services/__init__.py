# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import appointment_service
from . import assistant_service
from . import calendar_service
from . import client_service
from . import import_normalizer
from . import inventory_service
from . import marketing_service
from . import revenue_service
from . import settings_service
from . import spreadsheet_reader

__all__ = [
    "appointment_service",
    "assistant_service",
    "calendar_service",
    "client_service",
    "import_normalizer",
    "inventory_service",
    "marketing_service",
    "revenue_service",
    "settings_service",
    "spreadsheet_reader",
]
