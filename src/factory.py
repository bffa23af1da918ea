"""
Facade wiring from settings.

Builds an ObjectStorageFacade from environment-driven Settings, choosing
the boto3 client or the in-memory one according to mock mode.
"""

import logging
from typing import Optional

from .config.logging_config import configure_logging
from .config.settings import Settings, get_settings
from .core.facade import ObjectStorageFacade
from .core.models import BucketSettings, Credentials
from .infrastructure.storage.client import create_object_client

logger = logging.getLogger(__name__)


def create_facade(
    settings: Optional[Settings] = None,
    setup_logging: bool = False,
) -> ObjectStorageFacade:
    """
    Create a facade from settings.

    Args:
        settings: Settings to use (defaults to get_settings())
        setup_logging: Also configure console logging at settings.log_level

    Raises:
        ConfigurationError: required settings are missing
    """
    settings = settings or get_settings()

    if setup_logging:
        configure_logging(settings.log_level)

    missing_fields = settings.validate_required_fields()
    if missing_fields:
        logger.error(
            "Missing required configuration",
            extra={"missing_fields": missing_fields}
        )

    mock_mode = settings.s3_mock_mode

    def client_factory(credentials: Credentials, bucket_settings: BucketSettings):
        return create_object_client(credentials, bucket_settings, mock_mode=mock_mode)

    # storage_config() raises ConfigurationError for the missing fields above
    return ObjectStorageFacade(settings.storage_config(), client_factory=client_factory)
