"""
Error kinds raised by the storage layer.
"""


class CompatibilityError(Exception):
    """Base exception for compatibility computation errors."""
    pass


class StorageError(CompatibilityError):
    """Raised when reading from or writing to the backing store fails."""
    pass


class NotFoundError(CompatibilityError):
    """Raised when a user identifier has no corresponding profile."""
    pass
