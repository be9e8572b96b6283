from .client_repository import ClientRepository

__all__ = [
    "ClientRepository",
]
