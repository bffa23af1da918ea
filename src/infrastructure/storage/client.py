"""
Object storage clients for the facade.

S3ObjectClient talks to AWS S3 (or any S3-compatible endpoint such as
MinIO) through boto3. InMemoryObjectClient keeps objects in a dict so the
facade can be exercised without credentials or network.

Both satisfy the ObjectClient protocol from src.core.facade and raise
StorageError for backend failures.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ...core.errors import StorageError
from ...core.models import BucketSettings, Credentials

logger = logging.getLogger(__name__)

# head_object reports a missing key as a bare status code
_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class S3ObjectClient:
    """
    boto3-backed object client.

    The low-level boto3 client is thread-safe, so one instance can be
    shared by every operation of a facade. Timeouts and retries follow
    botocore's defaults.
    """

    def __init__(self, credentials: Credentials, settings: BucketSettings) -> None:
        """
        Build the boto3 client.

        boto3 is imported here rather than at module level so the
        in-memory client works without it installed.
        """
        try:
            import boto3
            from botocore.config import Config
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError:
            raise ImportError(
                "boto3 is required for S3 storage. Install with: pip install boto3"
            )

        self._client_error = ClientError
        self._client_errors = (ClientError, BotoCoreError)

        client_kwargs = {}
        if settings.endpoint_url:
            client_kwargs["endpoint_url"] = settings.endpoint_url

        self._s3_client = boto3.client(
            "s3",
            aws_access_key_id=credentials.access_key,
            aws_secret_access_key=credentials.secret_key,
            region_name=settings.region,
            verify=settings.tls_verify,
            config=Config(signature_version="s3v4"),
            **client_kwargs,
        )

        logger.info(
            "Initialized S3 object client",
            extra={
                "region": settings.region,
                "endpoint": settings.endpoint_url or "aws-default",
                "tls_verify": settings.tls_verify,
            }
        )

    def write_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        acl: str,
    ) -> None:
        try:
            self._s3_client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type,  # served inline instead of forced download
                ACL=acl,
            )
        except self._client_errors as e:
            logger.error(
                "Failed to upload object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Upload failed: {e}", bucket=bucket, key=key) from e

    def read_object(self, bucket: str, key: str) -> bytes:
        try:
            response = self._s3_client.get_object(Bucket=bucket, Key=key)
            return response["Body"].read()
        except self._client_errors as e:
            logger.error(
                "Failed to download object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Download failed: {e}", bucket=bucket, key=key) from e

    def delete_object(self, bucket: str, key: str) -> None:
        """
        Issue a DeleteObject call.

        S3 answers 204 whether or not the key existed, so success here is
        only an acknowledgement.
        """
        try:
            self._s3_client.delete_object(Bucket=bucket, Key=key)
        except self._client_errors as e:
            logger.error(
                "Failed to delete object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Delete failed: {e}", bucket=bucket, key=key) from e

    def object_exists(self, bucket: str, key: str) -> bool:
        try:
            self._s3_client.head_object(Bucket=bucket, Key=key)
            return True
        except self._client_error as e:
            if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                return False
            logger.error(
                "Failed to check object existence",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Existence check failed: {e}", bucket=bucket, key=key) from e
        except self._client_errors as e:
            logger.error(
                "Failed to check object existence",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Existence check failed: {e}", bucket=bucket, key=key) from e


# ---------------------------------------------------------------------------
# In-memory client for tests and local development
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StoredObject:
    """An object held by InMemoryObjectClient."""
    body: bytes
    content_type: str
    acl: str


@dataclass(frozen=True)
class ClientCall:
    """One recorded call on InMemoryObjectClient."""
    operation: str
    bucket: str
    key: str


class InMemoryObjectClient:
    """
    Dict-backed object client.

    Objects are stored per (bucket, key) and every call is appended to
    ``calls`` so tests can assert what reached the backend. Not suitable
    for production.
    """

    def __init__(self) -> None:
        self._objects: dict[tuple[str, str], StoredObject] = {}
        self._lock = threading.Lock()
        self.calls: list[ClientCall] = []
        logger.info("Initialized in-memory object client")

    def _record(self, operation: str, bucket: str, key: str) -> None:
        self.calls.append(ClientCall(operation=operation, bucket=bucket, key=key))

    def write_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        acl: str,
    ) -> None:
        with self._lock:
            self._record("write", bucket, key)
            self._objects[(bucket, key)] = StoredObject(
                body=bytes(body),
                content_type=content_type,
                acl=acl,
            )

        logger.debug(
            "Stored object in memory",
            extra={"bucket": bucket, "key": key, "size_bytes": len(body)}
        )

    def read_object(self, bucket: str, key: str) -> bytes:
        with self._lock:
            self._record("read", bucket, key)
            stored = self._objects.get((bucket, key))

        if stored is None:
            raise StorageError(f"Object not found: {bucket}/{key}", bucket=bucket, key=key)

        return stored.body

    def delete_object(self, bucket: str, key: str) -> None:
        # Missing keys are not an error, matching S3.
        with self._lock:
            self._record("delete", bucket, key)
            self._objects.pop((bucket, key), None)

        logger.debug("Deleted object from memory", extra={"bucket": bucket, "key": key})

    def object_exists(self, bucket: str, key: str) -> bool:
        with self._lock:
            self._record("exists", bucket, key)
            return (bucket, key) in self._objects

    def stored(self, bucket: str, key: str) -> Optional[StoredObject]:
        """Inspect a stored object without recording a call."""
        with self._lock:
            return self._objects.get((bucket, key))


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_object_client(
    credentials: Credentials,
    settings: BucketSettings,
    mock_mode: bool = False,
):
    """
    Create the object client a facade delegates to.

    Args:
        credentials: Access key pair, used only to build the boto3 client
        settings: Region, endpoint and TLS options
        mock_mode: If True, return an in-memory client instead

    Returns:
        ObjectClient implementation (S3 or in-memory)
    """
    if mock_mode:
        return InMemoryObjectClient()

    return S3ObjectClient(credentials, settings)
