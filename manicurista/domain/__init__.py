"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with business logic
- interfaces.py: Repository and collaborator contracts
"""

from .entities import (
    GUEST_CLIENT_NAME,
    Appointment,
    AppointmentStatus,
    Client,
    Prices,
    Product,
    Profile,
)
from .interfaces import (
    IAppointmentReader,
    IAppointmentRepository,
    IAppointmentWriter,
    IClientReader,
    IClientRepository,
    IClientWriter,
    IInventoryReader,
    IInventoryRepository,
    IInventoryWriter,
    ISpreadsheetReader,
    ITextGenerator,
)

__all__ = [
    # Domain entities
    "Appointment",
    "AppointmentStatus",
    "Client",
    "Product",
    "Profile",
    "Prices",
    "GUEST_CLIENT_NAME",
    # Repository interfaces
    "IAppointmentRepository",
    "IClientRepository",
    "IInventoryRepository",
    # Segregated interfaces
    "IAppointmentReader",
    "IAppointmentWriter",
    "IClientReader",
    "IClientWriter",
    "IInventoryReader",
    "IInventoryWriter",
    # Collaborators
    "ITextGenerator",
    "ISpreadsheetReader",
]
