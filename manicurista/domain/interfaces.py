"""
Abstract interfaces for repositories and external collaborators.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from .entities import Appointment, Client, Product


class IAppointmentReader(ABC):
    """Interface for appointment read operations."""

    @abstractmethod
    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        """Get appointment by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Appointment]:
        """Get all appointments in stored (date, time) order."""
        pass


class IAppointmentWriter(ABC):
    """Interface for appointment write operations."""

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        """Store a new appointment, assigning its id."""
        pass

    @abstractmethod
    def create_many(self, appointments: Sequence[Appointment]) -> List[Appointment]:
        """Store several appointments in one step, assigning their ids."""
        pass

    @abstractmethod
    def update(self, appointment: Appointment) -> Appointment:
        """Replace an existing appointment."""
        pass

    @abstractmethod
    def delete(self, appointment_id: int) -> bool:
        """Delete an appointment. Returns False when the id is unknown."""
        pass


class IAppointmentRepository(IAppointmentReader, IAppointmentWriter):
    """Complete appointment repository interface."""

    pass


class IClientReader(ABC):
    """Interface for client read operations."""

    @abstractmethod
    def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[Client]:
        """Get all clients."""
        pass


class IClientWriter(ABC):
    """Interface for client write operations."""

    @abstractmethod
    def create(self, client: Client) -> Client:
        """Create a new client."""
        pass

    @abstractmethod
    def update(self, client: Client) -> Client:
        """Update an existing client."""
        pass

    @abstractmethod
    def delete(self, client_id: int) -> bool:
        """Delete a client."""
        pass


class IClientRepository(IClientReader, IClientWriter):
    """Complete client repository interface combining read/write operations."""

    pass


class IInventoryReader(ABC):
    """Interface for inventory read operations."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Get all products."""
        pass

    @abstractmethod
    def get_low_stock_items(self) -> List[Product]:
        """Get products at or below their minimum stock."""
        pass


class IInventoryWriter(ABC):
    """Interface for inventory write operations."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Create a new product."""
        pass

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Update an existing product."""
        pass

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Delete a product."""
        pass

    @abstractmethod
    def update_stock(self, product_id: int, quantity_change: int) -> Product:
        """Update stock quantity (positive = add, negative = remove)."""
        pass


class IInventoryRepository(IInventoryReader, IInventoryWriter):
    """Complete inventory repository interface."""

    pass


class ITextGenerator(ABC):
    """
    Interface for the text-generation collaborator.
    Implementations raise TextGenerationError on any remote failure.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are available for remote calls."""
        pass

    @abstractmethod
    def generate(
        self,
        prompt: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None,
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
    ) -> str:
        """Generate text from a single prompt or an ordered {sender, text} history."""
        pass


class ISpreadsheetReader(ABC):
    """Interface for the file import boundary."""

    @abstractmethod
    def read_rows(self, content: bytes) -> List[dict]:
        """Parse the first sheet of a spreadsheet into row dicts keyed by header."""
        pass
