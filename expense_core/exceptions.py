"""Domain-specific exceptions for the expense store."""

class ValidationError(ValueError):
    """Raised when provided data does not meet validation requirements."""


class NotFoundError(LookupError):
    """Raised when an expense cannot be located by id."""


class StorageError(IOError):
    """Raised when the data file cannot be read, parsed or written."""
