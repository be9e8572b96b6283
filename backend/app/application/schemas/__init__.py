from .client import ClientFields, ClientResponse

__all__ = [
    "ClientFields",
    "ClientResponse",
]
