"""SQLAlchemy declarative base shared by the ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; ``Base.metadata`` owns the schema."""

    pass
