"""Integration tests for SQLAlchemyClientRepository against a real SQLite file."""

import pytest
from sqlalchemy import text

from app.domain.entities import UNSET, Client
from app.domain.exceptions import CorruptionError, StorageError
from app.infrastructure.database.repositories import SQLAlchemyClientRepository


def _client(name="Ann", surname="Lee", last_name="Park", contacts=("a@x.com",)) -> Client:
    return Client(
        name=name,
        surname=surname,
        last_name=last_name,
        contacts=list(contacts) if contacts is not None else None,
    )


@pytest.mark.asyncio
async def test_create_then_get_round_trips_every_field(db_session, session_factory):
    repo = SQLAlchemyClientRepository(db_session)
    contacts = [{"type": "email", "value": "a@x.com"}, {"type": "phone", "value": "123"}]
    created = await repo.create(_client(contacts=contacts))

    async with session_factory() as other:
        fetched = await SQLAlchemyClientRepository(other).get_by_id(created.id)

    assert fetched == created
    assert fetched.contacts == contacts


@pytest.mark.asyncio
async def test_contacts_stored_as_serialized_text(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    created = await repo.create(_client())

    row = (
        await db_session.execute(
            text("SELECT contacts, lastName FROM clients WHERE id = :id"), {"id": created.id}
        )
    ).one()
    assert row.contacts == '["a@x.com"]'
    assert row.lastName == "Park"


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    first = await repo.create(_client())
    second = await repo.create(_client())
    assert await repo.delete(second.id) is True

    third = await repo.create(_client())
    assert (first.id, second.id, third.id) == (1, 2, 3)


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "surname", "last_name", "contacts"])
async def test_missing_required_field_raises_storage_error(db_session, missing):
    repo = SQLAlchemyClientRepository(db_session)
    values = {"name": "Ann", "surname": "Lee", "last_name": "Park", "contacts": ["a@x.com"]}
    values[missing] = UNSET if missing == "contacts" else None

    with pytest.raises(StorageError):
        await repo.create(Client(**values))

    # Session was rolled back and is still usable
    assert await repo.get_all() == []
    created = await repo.create(_client())
    assert created.id is not None


@pytest.mark.asyncio
async def test_null_contacts_round_trip(db_session, session_factory):
    repo = SQLAlchemyClientRepository(db_session)
    created = await repo.create(Client(name="Ann", surname="Lee", last_name="Park", contacts=None))

    row = (
        await db_session.execute(
            text("SELECT contacts FROM clients WHERE id = :id"), {"id": created.id}
        )
    ).one()
    assert row.contacts == "null"

    async with session_factory() as other:
        fetched = await SQLAlchemyClientRepository(other).get_by_id(created.id)
    assert fetched.contacts is None


@pytest.mark.asyncio
async def test_update_overwrites_row(db_session, session_factory):
    repo = SQLAlchemyClientRepository(db_session)
    created = await repo.create(_client())
    created.update(name="Ann", surname="Lee", last_name="Kim", contacts=["b@x.com"])

    assert await repo.update(created) is created

    async with session_factory() as other:
        fetched = await SQLAlchemyClientRepository(other).get_by_id(created.id)
    assert fetched.last_name == "Kim"
    assert fetched.contacts == ["b@x.com"]
    assert fetched.updated_at > fetched.created_at


@pytest.mark.asyncio
async def test_update_of_missing_row_reports_none(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    ghost = _client()
    ghost.id = 404
    assert await repo.update(ghost) is None


@pytest.mark.asyncio
async def test_update_to_null_field_raises_storage_error(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    created = await repo.create(_client())
    created.update(name=None, surname="Lee", last_name="Park", contacts=[])
    with pytest.raises(StorageError):
        await repo.update(created)


@pytest.mark.asyncio
async def test_delete_missing_row_returns_false(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    assert await repo.delete(12345) is False


@pytest.mark.asyncio
async def test_search_matches_name_or_surname(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    await repo.create(_client(name="Ann", surname="Lee"))
    await repo.create(_client(name="Dan", surname="Brown"))
    await repo.create(_client(name="Bob", surname="Hanson"))
    await repo.create(_client(name="Eve", surname="Moss"))

    assert [c.name for c in await repo.get_all(search="an")] == ["Ann", "Dan", "Bob"]
    assert [c.name for c in await repo.get_all(search="Moss")] == ["Eve"]
    assert len(await repo.get_all()) == 4


@pytest.mark.asyncio
async def test_search_is_a_bound_parameter(db_session):
    repo = SQLAlchemyClientRepository(db_session)
    await repo.create(_client(name="Ann"))
    await repo.create(_client(name="100%"))

    assert await repo.get_all(search="' OR 1=1 --") == []
    assert [c.name for c in await repo.get_all(search="%")] == ["100%"]
    assert await repo.get_all(search="_nn") == []


@pytest.mark.asyncio
async def test_corrupted_contacts_raise_corruption_error(db_session):
    await db_session.execute(
        text(
            "INSERT INTO clients (name, surname, lastName, contacts, createdAt, updatedAt) "
            "VALUES ('Ann', 'Lee', 'Park', 'not json', 'x', 'x')"
        )
    )
    await db_session.commit()

    repo = SQLAlchemyClientRepository(db_session)
    with pytest.raises(CorruptionError):
        await repo.get_by_id(1)
