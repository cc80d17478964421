"""Error kinds raised by the appointment store.

The HTTP layer maps each kind to a status code; the store itself only
guarantees a distinguishable type and a human-readable message.
"""


class AppointmentError(Exception):
    """Base class for every failure the store reports."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthorizationError(AppointmentError):
    """The caller's role does not permit the operation."""


class ValidationError(AppointmentError):
    """Required input is missing or a value is outside its allowed set."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(AppointmentError):
    """The referenced appointment does not exist."""


class StorageError(AppointmentError):
    """The database failed underneath an operation."""
