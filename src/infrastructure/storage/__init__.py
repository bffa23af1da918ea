"""
Object storage clients for the facade.

Talks to S3 and S3-compatible endpoints via boto3.
Includes an in-memory client for tests and local development.
"""

from .client import (
    ClientCall,
    InMemoryObjectClient,
    S3ObjectClient,
    StoredObject,
    create_object_client,
)

__all__ = [
    "ClientCall",
    "InMemoryObjectClient",
    "S3ObjectClient",
    "StoredObject",
    "create_object_client",
]
