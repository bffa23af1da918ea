"""
Core object storage logic.

This package is framework-agnostic - it doesn't import boto3 or
pydantic. Key derivation, validation and file handling can be tested
without any storage backend, and the facade talks to storage only
through the ObjectClient protocol.
"""

from .errors import (
    BucketFacadeError,
    ConfigurationError,
    InvalidArgumentError,
    LocalIOError,
    StorageError,
)
from .facade import PUBLIC_READ_ACL, ObjectClient, ObjectStorageFacade
from .models import BucketSettings, Credentials, StorageConfig

__all__ = [
    "BucketFacadeError",
    "BucketSettings",
    "ConfigurationError",
    "Credentials",
    "InvalidArgumentError",
    "LocalIOError",
    "ObjectClient",
    "ObjectStorageFacade",
    "PUBLIC_READ_ACL",
    "StorageConfig",
    "StorageError",
]
