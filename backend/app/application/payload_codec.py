"""Conversion between wire JSON, client fields and the stored row representation.

``contacts`` is an arbitrary JSON value on the wire and in the domain entity,
but a serialized text column in the database.
"""

import json
from typing import Any

from pydantic import ValidationError

from app.application.schemas import ClientFields
from app.domain.entities import UNSET
from app.domain.exceptions import CorruptionError, ParseError


def decode_fields(raw: bytes | str) -> ClientFields:
    """Parse a request body into ClientFields, raising ParseError if it is malformed."""
    try:
        return ClientFields.model_validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        reason = "; ".join(_describe(error) for error in errors) or str(exc)
        raise ParseError(reason) from exc


def fields_contacts(fields: ClientFields) -> Any:
    """The decoded contacts, or UNSET when the body did not carry the key."""
    if "contacts" not in fields.model_fields_set:
        return UNSET
    return fields.contacts


def encode_contacts(contacts: Any) -> str | None:
    """Serialize contacts for storage; JSON null becomes "null".

    UNSET maps to None so the NOT NULL column rejects the row.
    """
    if contacts is UNSET:
        return None
    return json.dumps(contacts, ensure_ascii=False)


def decode_contacts(stored: str, client_id: int) -> Any:
    """Deserialize stored contacts, raising CorruptionError on unreadable text."""
    try:
        return json.loads(stored)
    except (TypeError, ValueError) as exc:
        raise CorruptionError("Client", client_id, "contacts") from exc


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
