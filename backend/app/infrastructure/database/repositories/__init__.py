from .client_repository import SQLAlchemyClientRepository

__all__ = [
    "SQLAlchemyClientRepository",
]
