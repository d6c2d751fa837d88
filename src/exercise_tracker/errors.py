"""Failure kinds raised by the service layer."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a service failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class ServiceError(Exception):
    """A classified failure carrying a human-readable message.

    Callers dispatch on ``kind`` rather than on exception subclasses.
    """

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def validation(cls, message: str) -> "ServiceError":
        """Malformed or out-of-range caller input."""
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> "ServiceError":
        """Well-formed reference to an entity that does not exist."""
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def storage(cls, message: str) -> "ServiceError":
        """Store failure not attributable to caller input."""
        return cls(ErrorKind.STORAGE, message)

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value}, message={self.message!r})"
