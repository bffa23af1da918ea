"""
Object storage facade.

ObjectStorageFacade is configured once with credentials and a bucket, then
reused for uploads, downloads, deletes and public URLs. It validates
arguments, derives object keys and delegates the actual work to an
ObjectClient. It knows nothing about boto3; the default client factory is
imported lazily from the infrastructure layer.

Operations keep all per-call values (object key, file info, destination)
in local variables, so one facade may be shared between threads as long
as its client is thread-safe.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol, Union

from .errors import InvalidArgumentError
from .files import inspect_local_file, write_local_file
from .keys import (
    PathLike,
    build_object_key,
    build_public_url,
    download_destination,
    require_local_path,
    require_remote_key,
)
from .models import BucketSettings, Credentials, StorageConfig

logger = logging.getLogger(__name__)

# Every upload is world-readable. Kept as a named policy so it is easy to
# find and to make configurable later.
PUBLIC_READ_ACL = "public-read"


# ---------------------------------------------------------------------------
# Protocols (interfaces)
# ---------------------------------------------------------------------------

class ObjectClient(Protocol):
    """
    Interface for the storage client the facade delegates to.

    Implementations raise StorageError for backend failures.
    """

    def write_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        acl: str,
    ) -> None:
        """Store body under bucket/key."""
        ...

    def read_object(self, bucket: str, key: str) -> bytes:
        """Return the body stored under bucket/key."""
        ...

    def delete_object(self, bucket: str, key: str) -> None:
        """Ask the backend to remove bucket/key."""
        ...

    def object_exists(self, bucket: str, key: str) -> bool:
        """Check whether bucket/key is currently present."""
        ...


ClientFactory = Callable[[Credentials, BucketSettings], ObjectClient]


def _default_client_factory(
    credentials: Credentials,
    settings: BucketSettings,
) -> ObjectClient:
    from ..infrastructure.storage.client import create_object_client

    return create_object_client(credentials, settings)


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class ObjectStorageFacade:
    """
    Upload, download, delete and link objects in one bucket.

    Example:
        facade = ObjectStorageFacade({
            "accessKey": "AKIA...",
            "secretKey": "...",
            "bucket": "my-bucket",
        })
        key = facade.put("local/cat.png", "images")
        facade.public_url(key)  # http://my-bucket.s3.amazonaws.com/images/cat.png
    """

    def __init__(
        self,
        config: Union[StorageConfig, Mapping[str, Any]],
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        if not isinstance(config, StorageConfig):
            config = StorageConfig.from_mapping(config)

        credentials, settings = config.split()
        factory = client_factory or _default_client_factory

        self._settings = settings
        self._client = factory(credentials, settings)

        logger.info(
            "Initialized object storage facade",
            extra={"bucket": settings.bucket, "region": settings.region}
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self._settings!r})"

    @property
    def settings(self) -> BucketSettings:
        """Secret-free configuration this facade was built with."""
        return self._settings

    @property
    def bucket(self) -> str:
        return self._settings.bucket

    @property
    def client(self) -> ObjectClient:
        return self._client

    def put(self, local_path: PathLike, remote_dir: Optional[str] = None) -> str:
        """
        Upload a local file, publicly readable.

        The object key is the file's base name, prefixed with remote_dir
        (one leading/trailing slash trimmed) when given.

        Returns:
            The object key the file was written under.

        Raises:
            InvalidArgumentError: empty or missing local_path, or no file name
            LocalIOError: the file could not be read
            StorageError: the backend rejected the upload
        """
        path = require_local_path(local_path)
        if not os.path.exists(path):
            raise InvalidArgumentError(f"The local path does not exist: {path}")

        key = build_object_key(os.path.basename(path), remote_dir)
        info = inspect_local_file(path)

        self._client.write_object(
            bucket=self.bucket,
            key=key,
            body=info.content,
            content_type=info.mime,
            acl=PUBLIC_READ_ACL,
        )

        logger.info(
            "Uploaded object",
            extra={
                "bucket": self.bucket,
                "key": key,
                "size_bytes": info.size,
                "content_type": info.mime,
            }
        )

        return key

    def get(self, remote_key: str, local_path: PathLike) -> Path:
        """
        Download an object into local_path.

        The full key is appended to local_path, so ``"a/b/c.txt"`` is
        written to ``local_path/a/b/c.txt``. Intermediate directories are
        created and an existing file is overwritten.

        Returns:
            Path of the written file.

        Raises:
            InvalidArgumentError: empty remote_key or local_path
            StorageError: the object is missing or the backend failed
            LocalIOError: the local write failed
        """
        key = require_remote_key(remote_key)
        path = require_local_path(local_path)
        destination = download_destination(path, key)

        body = self._client.read_object(bucket=self.bucket, key=key)
        write_local_file(destination, body)

        logger.info(
            "Downloaded object",
            extra={
                "bucket": self.bucket,
                "key": key,
                "destination": str(destination),
                "size_bytes": len(body),
            }
        )

        return destination

    def delete(self, remote_key: str) -> None:
        """
        Ask the backend to delete an object.

        An acknowledged delete is not a confirmed one: some backends answer
        204 while a cache or replica still serves the object. Call
        exists() afterwards when removal must be confirmed.
        """
        key = require_remote_key(remote_key)

        self._client.delete_object(bucket=self.bucket, key=key)

        logger.info(
            "Delete acknowledged",
            extra={"bucket": self.bucket, "key": key}
        )

    def exists(self, remote_key: str) -> bool:
        """Check whether an object is currently present in the bucket."""
        key = require_remote_key(remote_key)
        return self._client.object_exists(bucket=self.bucket, key=key)

    def public_url(self, remote_key: str, use_tls: bool = False) -> str:
        """
        Public URL of an object: ``{scheme}://{bucket}.{endpoint_host}/{key}``.

        No network call and no validation; a single leading slash on the
        key is dropped.
        """
        return build_public_url(
            bucket=self.bucket,
            endpoint_host=self._settings.endpoint_host,
            remote_key=remote_key,
            use_tls=use_tls,
        )
