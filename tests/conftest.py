"""Shared test fixtures for bucket facade tests."""

import sys
from pathlib import Path

# Add project root to path so imports work without installing the package
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from typing import Callable

import pytest

from src.core.facade import ObjectStorageFacade
from src.core.models import BucketSettings, Credentials, StorageConfig
from src.infrastructure.storage.client import InMemoryObjectClient

TEST_BUCKET = "test-bucket"
TEST_SECRET = "very-secret-key-value"


@pytest.fixture
def storage_config() -> StorageConfig:
    return StorageConfig(
        access_key="AKIATEST",
        secret_key=TEST_SECRET,
        bucket=TEST_BUCKET,
    )


@pytest.fixture
def memory_client() -> InMemoryObjectClient:
    return InMemoryObjectClient()


@pytest.fixture
def client_factory(
    memory_client: InMemoryObjectClient,
) -> Callable[[Credentials, BucketSettings], InMemoryObjectClient]:
    """Factory that hands the facade the shared in-memory client."""
    def factory(credentials: Credentials, settings: BucketSettings) -> InMemoryObjectClient:
        return memory_client

    return factory


@pytest.fixture
def facade(storage_config, client_factory) -> ObjectStorageFacade:
    return ObjectStorageFacade(storage_config, client_factory=client_factory)


@pytest.fixture
def local_file(tmp_path: Path) -> Path:
    """A small PNG-named file under tmp_path/local."""
    path = tmp_path / "local" / "cat.png"
    path.parent.mkdir()
    path.write_bytes(b"\x89PNG\r\n\x1a\nnot-really-a-cat")
    return path
