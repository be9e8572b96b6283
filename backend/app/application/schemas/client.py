"""Pydantic DTOs (Data Transfer Objects) for the Client feature.

Wire JSON is camelCase (``lastName``, ``createdAt``); attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ClientFields(BaseModel):
    """Decoded request body for create and update.

    Every field may be absent here; the store's NOT NULL columns decide
    whether a record is complete. Unknown keys (``id``, timestamps) are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(None, examples=["Ann"])
    surname: str | None = Field(None, examples=["Lee"])
    last_name: str | None = Field(None, examples=["Park"])
    contacts: Any = Field(None, examples=[["ann@example.com"]])


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    name: str
    surname: str
    last_name: str
    contacts: Any
    created_at: str
    updated_at: str
