"""Application service (use case) for Client operations."""

import logging

from app.application.interfaces import ClientRepository
from app.application.payload_codec import fields_contacts
from app.application.schemas import ClientFields
from app.domain.entities import Client
from app.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _parse_id(raw_id: int | str) -> int | None:
    """Coerce a path segment to the integer key; None when it cannot match any row."""
    if isinstance(raw_id, str):
        if not (raw_id.isascii() and raw_id.isdigit()):
            return None
        raw_id = int(raw_id)
    if not _MIN_ID <= raw_id <= _MAX_ID:
        return None
    return raw_id


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def get_client(self, client_id: int | str) -> Client:
        key = _parse_id(client_id)
        client = await self._repository.get_by_id(key) if key is not None else None
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    async def list_clients(self, search: str | None = None) -> list[Client]:
        return await self._repository.get_all(search=search or None)

    async def create_client(self, fields: ClientFields) -> Client:
        client = Client(
            name=fields.name,
            surname=fields.surname,
            last_name=fields.last_name,
            contacts=fields_contacts(fields),
        )
        created = await self._repository.create(client)
        logger.info("Created client %s", created.id)
        return created

    async def update_client(self, client_id: int | str, fields: ClientFields) -> Client:
        client = await self.get_client(client_id)
        client.update(
            name=fields.name,
            surname=fields.surname,
            last_name=fields.last_name,
            contacts=fields_contacts(fields),
        )
        updated = await self._repository.update(client)
        # Row vanished between the read and the write
        if updated is None:
            raise NotFoundError("Client", client_id)
        logger.info("Updated client %s", updated.id)
        return updated

    async def delete_client(self, client_id: int | str) -> None:
        key = _parse_id(client_id)
        deleted = key is not None and await self._repository.delete(key)
        if deleted:
            logger.info("Deleted client %s", key)
        else:
            logger.debug("Delete of client %r matched no row", client_id)
