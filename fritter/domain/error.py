"""Domain layer errors.

Every error carries the user-visible message. The interface layer maps each
class to exactly one HTTP status code.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a signed-in user."""

    def __init__(self, message: str = "You must be logged in to complete this action."):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} with ID {identifier} does not exist.")


class ForbiddenError(DomainError):
    """Raised when a user acts on a resource they do not own."""

    pass


class ConflictError(DomainError):
    """Raised when an operation would duplicate a unique record."""

    pass


class InvalidInputError(DomainError):
    """Raised when a payload fails shape or content validation."""

    pass


class ContentTooLongError(InvalidInputError):
    """Raised when a payload is well-formed but exceeds a size limit."""

    pass


class StorageUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    def __init__(self, message: str = "The data store is temporarily unavailable."):
        super().__init__(message)
