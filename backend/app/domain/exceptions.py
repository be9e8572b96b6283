"""Domain-specific exceptions — framework-independent."""


class NotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StorageError(Exception):
    """Raised when the storage engine fails (connection, constraint violation, ...)."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage failure during {operation}: {reason}")


class ParseError(Exception):
    """Raised when a request body cannot be decoded into client fields."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed request body: {reason}")


class CorruptionError(Exception):
    """Raised when a stored value can no longer be decoded.

    Only reachable if the row was written outside this application.
    """

    def __init__(self, entity_type: str, entity_id: int | str, field: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(
            f"{entity_type} with id '{entity_id}' has an unreadable '{field}' value"
        )
