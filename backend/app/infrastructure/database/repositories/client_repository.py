"""Concrete repository implementation for Client backed by SQLAlchemy."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ClientRepository
from app.application.payload_codec import decode_contacts, encode_contacts
from app.domain.entities import Client
from app.domain.exceptions import StorageError
from app.infrastructure.database.models import ClientModel

logger = logging.getLogger(__name__)


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions.

    Each mutation commits on its own. Engine failures are rolled back and
    surfaced as StorageError.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            surname=model.surname,
            last_name=model.last_name,
            contacts=decode_contacts(model.contacts, model.id),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            name=entity.name,
            surname=entity.surname,
            last_name=entity.last_name,
            contacts=encode_contacts(entity.contacts),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            await self._session.rollback()
            reason = str(getattr(exc, "orig", None) or exc)
            logger.error("Client %s failed: %s", operation, reason)
            raise StorageError(operation, reason) from exc

    async def get_by_id(self, client_id: int) -> Client | None:
        async with self._storage_errors("get"):
            result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_all(self, *, search: str | None = None) -> list[Client]:
        stmt = select(ClientModel)

        if search:
            stmt = stmt.where(
                or_(
                    ClientModel.name.contains(search, autoescape=True),
                    ClientModel.surname.contains(search, autoescape=True),
                )
            )

        stmt = stmt.order_by(ClientModel.id)
        async with self._storage_errors("list"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        async with self._storage_errors("create"):
            self._session.add(model)
            await self._session.commit()
        return self._to_entity(model)

    async def update(self, client: Client) -> Client | None:
        stmt = (
            update(ClientModel)
            .where(ClientModel.id == client.id)
            .values({
                ClientModel.name: client.name,
                ClientModel.surname: client.surname,
                ClientModel.last_name: client.last_name,
                ClientModel.contacts: encode_contacts(client.contacts),
                ClientModel.updated_at: client.updated_at,
            })
            .execution_options(synchronize_session=False)
        )
        async with self._storage_errors("update"):
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                await self._session.rollback()
                return None
            await self._session.commit()
        return client

    async def delete(self, client_id: int) -> bool:
        stmt = (
            delete(ClientModel)
            .where(ClientModel.id == client_id)
            .execution_options(synchronize_session=False)
        )
        async with self._storage_errors("delete"):
            result = await self._session.execute(stmt)
            await self._session.commit()
        return result.rowcount > 0
