"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables (and a .env file)
with defaults matching the facade's own: region sa-east-1, endpoint
host s3.amazonaws.com, TLS verification off.

Mock mode swaps the S3 client for an in-memory one so the facade can be
used locally without credentials.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.models import DEFAULT_ENDPOINT_HOST, DEFAULT_REGION, StorageConfig

# Credentials used in mock mode, never sent anywhere
_MOCK_ACCESS_KEY = "mock-access-key"
_MOCK_SECRET_KEY = "mock-secret-key"


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    All settings can be overridden via environment variables, e.g.
    ``S3_BUCKET=my-bucket``.
    """

    # S3 Storage Configuration
    s3_access_key: str = Field(
        default="",
        description="Access key ID. Required unless in mock mode."
    )
    s3_secret_key: str = Field(
        default="",
        description="Secret access key. Required unless in mock mode.",
        repr=False,
    )
    s3_bucket: str = Field(
        default="",
        description="Bucket every operation targets"
    )
    s3_region: str = Field(
        default=DEFAULT_REGION,
        description="Bucket region"
    )
    s3_endpoint_host: str = Field(
        default=DEFAULT_ENDPOINT_HOST,
        description="Host used to build public URLs ({bucket}.{host})"
    )
    s3_endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom S3-compatible endpoint (MinIO, LocalStack). Uses AWS when unset."
    )
    s3_tls_verify: bool = Field(
        default=False,
        description="Verify TLS certificates on SDK requests"
    )
    s3_mock_mode: bool = Field(
        default=False,
        description="Use an in-memory client instead of S3. Enables local dev without a bucket."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_required_fields(self) -> list[str]:
        """
        Return the environment variables that must be set but are not.

        Credentials are only required outside mock mode; the bucket is
        always required since it also shapes public URLs.
        """
        missing = []

        if not self.s3_bucket:
            missing.append("S3_BUCKET")

        if not self.s3_mock_mode:
            if not self.s3_access_key:
                missing.append("S3_ACCESS_KEY")
            if not self.s3_secret_key:
                missing.append("S3_SECRET_KEY")

        return missing

    def storage_config(self) -> StorageConfig:
        """Build the facade configuration. Raises ConfigurationError if incomplete."""
        access_key = self.s3_access_key
        secret_key = self.s3_secret_key
        if self.s3_mock_mode:
            access_key = access_key or _MOCK_ACCESS_KEY
            secret_key = secret_key or _MOCK_SECRET_KEY

        return StorageConfig(
            access_key=access_key,
            secret_key=secret_key,
            bucket=self.s3_bucket,
            region=self.s3_region,
            endpoint_host=self.s3_endpoint_host,
            tls_verify=self.s3_tls_verify,
            endpoint_url=self.s3_endpoint_url,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Loaded once per process. For tests, call get_settings.cache_clear()
    after changing the environment.
    """
    return Settings()
