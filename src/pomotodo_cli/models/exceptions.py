"""Custom exceptions for Pomotodo CLI."""


class PomotodoError(Exception):
    """Base exception for all Pomotodo errors."""


class ValidationError(PomotodoError):
    """Raised when a task is rejected (empty name or a field containing the delimiter)."""


class OutOfRangeError(PomotodoError, IndexError):
    """Raised when a task store index does not point at a task."""


class StorageError(PomotodoError):
    """Raised when the task file cannot be read or written."""
