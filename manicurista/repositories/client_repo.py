"""In-memory client repository."""

from dataclasses import replace
from typing import Iterable, List, Optional

from manicurista.core.exceptions import NotFoundError
from manicurista.domain.entities import Client
from manicurista.domain.interfaces import IClientRepository


class ClientRepository(IClientRepository):
    """Repository for clients, kept in insertion order."""

    def __init__(self, clients: Optional[Iterable[Client]] = None) -> None:
        self._items: List[Client] = []
        self._last_id = 0
        for client in clients or []:
            self._store(client)

    def _store(self, client: Client) -> Client:
        if client.id is None:
            client = replace(client, id=self._last_id + 1)
        self._last_id = max(self._last_id, client.id)
        self._items.append(client)
        return client

    def _index_of(self, client_id: int) -> Optional[int]:
        return next(
            (i for i, client in enumerate(self._items) if client.id == client_id),
            None,
        )

    def get_by_id(self, client_id: int) -> Optional[Client]:
        index = self._index_of(client_id)
        return replace(self._items[index]) if index is not None else None

    def get_all(self) -> List[Client]:
        return [replace(client) for client in self._items]

    def create(self, client: Client) -> Client:
        return replace(self._store(replace(client, id=None)))

    def update(self, client: Client) -> Client:
        index = self._index_of(client.id)
        if index is None:
            raise NotFoundError("Client", client.id)
        self._items[index] = replace(client)
        return replace(client)

    def delete(self, client_id: int) -> bool:
        index = self._index_of(client_id)
        if index is None:
            return False
        del self._items[index]
        return True
