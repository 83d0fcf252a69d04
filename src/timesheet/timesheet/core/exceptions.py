class DomainError(Exception):
    """Base exception for failures crossing the storage boundary."""


class StorageError(DomainError):
    """Raised by repository adapters when the backing store fails.

    Services never let this escape: it is turned into a ``StorageFailure`` value.
    """
