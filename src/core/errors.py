"""
Error taxonomy for the bucket facade.

Every error raised by the facade derives from BucketFacadeError, so callers
can catch one type. The subclasses also inherit from the closest builtin
(ValueError, OSError) so existing ``except ValueError`` blocks keep working.
"""

from typing import Optional


class BucketFacadeError(Exception):
    """Base class for all facade errors."""
    pass


class ConfigurationError(BucketFacadeError, ValueError):
    """Raised when required configuration is missing or invalid."""
    pass


class InvalidArgumentError(BucketFacadeError, ValueError):
    """Raised when an operation is called with an empty or unusable argument."""
    pass


class StorageError(BucketFacadeError):
    """
    Raised when the storage backend rejects or fails a call.

    Covers not-found, access-denied and transport failures. The SDK
    exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        bucket: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.bucket = bucket
        self.key = key


class LocalIOError(BucketFacadeError, OSError):
    """Raised when reading or writing a local file fails."""
    pass
