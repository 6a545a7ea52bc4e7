"""Domain errors raised by the service layer.

The HTTP layer maps each class to a status code; services never deal with
status codes themselves.
"""


class ServiceError(Exception):
    """Base class for errors raised by the domain services."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Input is malformed or outside its allowed constraints."""


class InvalidArgumentError(ValidationError):
    """An identifier is missing, not an integer, or not positive."""


class NotFoundError(ServiceError):
    """A well-formed reference points to a record that does not exist."""


class ConflictError(ServiceError):
    """The operation would break a uniqueness or dependency rule."""


class InternalError(ServiceError):
    """Unexpected storage or environment failure."""
