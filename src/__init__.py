"""
Bucket Facade - upload, download, delete and link objects in one S3 bucket.

This package contains:
- core: Framework-agnostic facade, key derivation and validation
- infrastructure: Storage clients (boto3 S3, in-memory)
- config: Environment-driven settings and logging
- factory: Builds a facade from settings
"""

from .core import (
    PUBLIC_READ_ACL,
    BucketFacadeError,
    ConfigurationError,
    InvalidArgumentError,
    LocalIOError,
    ObjectStorageFacade,
    StorageConfig,
    StorageError,
)

__version__ = "0.1.0"

__all__ = [
    "BucketFacadeError",
    "ConfigurationError",
    "InvalidArgumentError",
    "LocalIOError",
    "ObjectStorageFacade",
    "PUBLIC_READ_ACL",
    "StorageConfig",
    "StorageError",
]
