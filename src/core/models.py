"""
Configuration types for the bucket facade.

Credentials and bucket settings are kept in separate types. StorageConfig
is what callers build; the facade splits it once at construction, hands
the Credentials to the client factory and keeps only BucketSettings.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}

DEFAULT_REGION = "sa-east-1"
DEFAULT_ENDPOINT_HOST = "s3.amazonaws.com"

# camelCase keys accepted by StorageConfig.from_mapping
_MAPPING_ALIASES = {
    "accessKey": "access_key",
    "secretKey": "secret_key",
    "bucket": "bucket",
    "region": "region",
    "endpointHost": "endpoint_host",
    "tlsVerify": "tls_verify",
    "endpointUrl": "endpoint_url",
}


def parse_flag(value: Any, name: str) -> bool:
    """Read a boolean option that may arrive as a string from a file or env."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


@dataclass(frozen=True)
class Credentials:
    """Access key pair passed to the storage client. Secret is hidden from repr."""
    access_key: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class BucketSettings:
    """
    Secret-free configuration retained by the facade.

    Frozen because a facade is bound to one bucket for its lifetime.
    """
    bucket: str
    region: str = DEFAULT_REGION
    endpoint_host: str = DEFAULT_ENDPOINT_HOST
    tls_verify: bool = False
    endpoint_url: Optional[str] = None


@dataclass
class StorageConfig:
    """
    Full configuration, credentials included.

    Validated eagerly so a missing key fails here with ConfigurationError
    rather than later inside the SDK.
    """
    access_key: str
    secret_key: str = field(repr=False)
    bucket: str
    region: str = DEFAULT_REGION
    endpoint_host: str = DEFAULT_ENDPOINT_HOST
    tls_verify: bool = False
    endpoint_url: Optional[str] = None  # custom S3-compatible endpoint (MinIO etc.)

    def __post_init__(self) -> None:
        missing = [
            name for name in ("access_key", "secret_key", "bucket")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required storage configuration: {', '.join(missing)}"
            )
        if not self.region:
            self.region = DEFAULT_REGION
        if not self.endpoint_host:
            self.endpoint_host = DEFAULT_ENDPOINT_HOST

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "StorageConfig":
        """
        Build a config from a plain mapping.

        Accepts camelCase keys (``accessKey``, ``endpointHost``) and their
        snake_case equivalents. Other keys (SDK options such as
        ``version`` or ``http``) are skipped.
        """
        values: dict[str, Any] = {}
        for name, value in mapping.items():
            attr = _MAPPING_ALIASES.get(name, name)
            if attr not in _MAPPING_ALIASES.values():
                logger.debug("Ignoring storage configuration key", extra={"config_key": name})
                continue
            values[attr] = value

        return cls(
            access_key=values.get("access_key") or "",
            secret_key=values.get("secret_key") or "",
            bucket=values.get("bucket") or "",
            region=values.get("region") or DEFAULT_REGION,
            endpoint_host=values.get("endpoint_host") or DEFAULT_ENDPOINT_HOST,
            tls_verify=parse_flag(values.get("tls_verify", False), "tls_verify"),
            endpoint_url=values.get("endpoint_url") or None,
        )

    def split(self) -> tuple[Credentials, BucketSettings]:
        """Separate the credentials from everything the facade keeps."""
        credentials = Credentials(
            access_key=self.access_key,
            secret_key=self.secret_key,
        )
        settings = BucketSettings(
            bucket=self.bucket,
            region=self.region,
            endpoint_host=self.endpoint_host,
            tls_verify=self.tls_verify,
            endpoint_url=self.endpoint_url,
        )
        return credentials, settings
