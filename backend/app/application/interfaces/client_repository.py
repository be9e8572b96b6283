"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        """Retrieve a single client by its integer id."""
        ...

    @abstractmethod
    async def get_all(self, *, search: str | None = None) -> list[Client]:
        """Retrieve all clients, optionally those whose name or surname contains ``search``."""
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Persist a new client and return it with its assigned id."""
        ...

    @abstractmethod
    async def update(self, client: Client) -> Client | None:
        """Overwrite an existing client. Returns None if no row was affected."""
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        """Delete a client. Returns True if deleted, False if not found."""
        ...
