"""Typed errors raised by services and mapped to HTTP responses."""


class DomainError(Exception):
    """Base error with a stable machine-readable code."""

    code = "E_DOMAIN"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(DomainError):
    """Malformed user id, date, month or period."""

    code = "E_INVALID_INPUT"


class UserNotFoundError(DomainError):
    """No user row exists for the requested id."""

    code = "E_USER_NOT_FOUND"


class MealNotFoundError(DomainError):
    """No meal row exists for the requested id."""

    code = "E_MEAL_NOT_FOUND"


class StorageUnavailableError(DomainError):
    """The row store could not be read or written."""

    code = "E_STORAGE_UNAVAILABLE"
