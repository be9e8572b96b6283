from .client import UNSET, Client, next_timestamp, utc_timestamp

__all__ = [
    "UNSET",
    "Client",
    "next_timestamp",
    "utc_timestamp",
]
