# Repositories package initialization
# In-memory implementations of the domain repository interfaces

from .appointment_repo import AppointmentRepository
from .client_repo import ClientRepository
from .gemini_repo import GeminiTextGenerator
from .inventory_repository import InventoryRepository

__all__ = [
    "AppointmentRepository",
    "ClientRepository",
    "InventoryRepository",
    "GeminiTextGenerator",
]
