"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing or malformed input)."""

    pass


class ConflictError(DomainError):
    """Raised when a write collides with an existing unique value."""

    pass


class UniqueViolationError(ConflictError):
    """Raised by repositories when an insert or update hits a unique constraint.

    Attributes:
        field: Name of the field whose uniqueness was violated
    """

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} with this {field} already exists")


class AuthenticationError(DomainError):
    """Base class for authentication failures."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match an account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.")


class InvalidTokenError(AuthenticationError):
    """Raised when a presented bearer token fails verification."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token.")


class AuthenticationRequiredError(AuthenticationError):
    """Raised when a protected call carries neither a token nor a session."""

    def __init__(self) -> None:
        super().__init__("Authentication token or session required.")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
