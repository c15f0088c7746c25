"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed filter, vote value or request payload."""

    pass


class UnauthorizedError(DomainError):
    """Raised when the album service rejects the bearer credential."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when the caller lacks the privilege for an operation."""

    def __init__(self, message: str = "You are not allowed to do that"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
