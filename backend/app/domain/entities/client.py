"""Domain entity — pure Python business object for a CRM client (contact)."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class _Unset:
    """Marker for a field the request did not send (as opposed to JSON null)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def utc_timestamp(moment: datetime | None = None) -> str:
    """Render a UTC instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment or datetime.now(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def next_timestamp(previous: str) -> str:
    """Current timestamp, forced strictly past ``previous`` (1 ms step)."""
    now = datetime.now(timezone.utc)
    now = now.replace(microsecond=now.microsecond // 1000 * 1000)
    try:
        last = datetime.strptime(previous, _TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return utc_timestamp(now)
    if now <= last:
        now = last + timedelta(milliseconds=1)
    return utc_timestamp(now)


@dataclass
class Client:
    """Core domain entity for a client record.

    ``id`` is assigned by the store on creation. ``contacts`` holds the
    structured (decoded) value, where None is JSON null and UNSET means
    the value was never supplied; serialization happens at the storage edge.
    """

    name: str | None
    surname: str | None
    last_name: str | None
    contacts: Any = UNSET
    id: int | None = None
    created_at: str = field(default_factory=utc_timestamp)
    updated_at: str = ""

    def __post_init__(self) -> None:
        if not self.updated_at:
            self.updated_at = self.created_at

    def update(
        self,
        name: str | None,
        surname: str | None,
        last_name: str | None,
        contacts: Any,
    ) -> None:
        """Replace every mutable field wholesale and refresh updated_at."""
        self.name = name
        self.surname = surname
        self.last_name = last_name
        self.contacts = contacts
        self.updated_at = next_timestamp(self.updated_at)
