"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidArgumentError(DomainError):
    """Raised when caller input violates a domain rule."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class ServiceUnavailableError(DomainError):
    """Raised when the backing store or object storage cannot be reached."""

    def __init__(self, message: str = "Service temporarily unavailable"):
        super().__init__(message)
