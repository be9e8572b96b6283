"""SQLAlchemy ORM model for the Client entity."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class ClientModel(Base):
    """ORM model — maps to the 'clients' table.

    Column names keep the camelCase used on the wire. ``sqlite_autoincrement``
    stops SQLite from handing out the id of a deleted row again.
    """

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    surname: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column("lastName", Text, nullable=False)
    contacts: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column("createdAt", Text, nullable=False)
    updated_at: Mapped[str] = mapped_column("updatedAt", Text, nullable=False)

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, name='{self.name}', surname='{self.surname}')>"
