"""Domain-level exceptions.

All failures a single user action can run into are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all portal errors."""


class ValidationError(DomainException):
    """A required field is missing or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreError(DomainException):
    """The backing store rejected or failed an operation.

    The message carries the raw underlying error text.
    """

    def __str__(self) -> str:
        return f"Store operation failed: {super().__str__()}"


class NotificationError(DomainException):
    """A best-effort notification could not be delivered.

    Only ever logged, never shown to the user.
    """
