"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidIdentifierError(Exception):
    """Raised when an identifier does not match the store's id format."""

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__("Invalid id format")


class FieldValidationError(Exception):
    """Raised when a supplied field (or the lack of any) fails validation."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        self.message = message
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when credentials or a bearer token are rejected.

    ``scheme`` is the HTTP auth scheme the client should retry with
    (``Basic`` for the login flow, ``Bearer`` for protected endpoints).
    """

    def __init__(self, message: str, scheme: str = "Bearer"):
        self.message = message
        self.scheme = scheme
        super().__init__(message)
