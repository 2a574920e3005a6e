"""
Client service.

Appointments reference clients by display name only, so the join between a
client and their appointments is computed here at read time.
"""

import logging
from typing import List

from manicurista.core.exceptions import NotFoundError, ValidationError
from manicurista.domain.entities import Appointment, Client
from manicurista.domain.interfaces import IAppointmentReader, IClientRepository
from manicurista.schemas.dtos import ClientRequest
from manicurista.utils.client_utils import same_client_name

logger = logging.getLogger(__name__)


class ClientService:
    """Application service for client-related use-cases."""

    def __init__(
        self, client_repo: IClientRepository, appointment_repo: IAppointmentReader
    ) -> None:
        self.client_repo = client_repo
        self.appointment_repo = appointment_repo

    def list_clients(self) -> List[Client]:
        return self.client_repo.get_all()

    def get_client(self, client_id: int) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    def add_client(self, request: ClientRequest) -> Client:
        request.validate()
        client = self.client_repo.create(self._to_domain(request))
        logger.info("Client created", extra={"context": {"client_id": client.id}})
        return client

    def update_client(self, client_id: int, request: ClientRequest) -> Client:
        self.get_client(client_id)
        request.validate()
        client = self.client_repo.update(self._to_domain(request, client_id))
        logger.info("Client updated", extra={"context": {"client_id": client_id}})
        return client

    def delete_client(self, client_id: int) -> bool:
        deleted = self.client_repo.delete(client_id)
        if deleted:
            logger.info("Client deleted", extra={"context": {"client_id": client_id}})
        return deleted

    def appointments_for(self, client_id: int) -> List[Appointment]:
        """Appointments booked under the client's display name, in stored order."""
        client = self.get_client(client_id)
        return [
            a
            for a in self.appointment_repo.list_all()
            if same_client_name(a.client_name, client.name)
        ]

    def _to_domain(self, request: ClientRequest, client_id=None) -> Client:
        try:
            return request.to_domain(client_id=client_id)
        except ValueError as e:
            raise ValidationError(str(e))
