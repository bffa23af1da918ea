"""
Tests for environment-driven settings and facade wiring.

Settings are built with ``_env_file=None`` so a developer's local .env
does not leak into the results.
"""

import pytest

from src.config.settings import Settings, get_settings
from src.core.errors import ConfigurationError
from src.factory import create_facade
from src.infrastructure.storage.client import InMemoryObjectClient, S3ObjectClient


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "S3_ACCESS_KEY",
        "S3_SECRET_KEY",
        "S3_BUCKET",
        "S3_REGION",
        "S3_ENDPOINT_HOST",
        "S3_ENDPOINT_URL",
        "S3_TLS_VERIFY",
        "S3_MOCK_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for loading settings from the environment."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.s3_region == "sa-east-1"
        assert settings.s3_endpoint_host == "s3.amazonaws.com"
        assert settings.s3_tls_verify is False
        assert settings.s3_mock_mode is False
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("S3_BUCKET", "env-bucket")
        monkeypatch.setenv("S3_REGION", "eu-west-1")
        monkeypatch.setenv("S3_TLS_VERIFY", "true")

        settings = Settings(_env_file=None)

        assert settings.s3_bucket == "env-bucket"
        assert settings.s3_region == "eu-west-1"
        assert settings.s3_tls_verify is True

    def test_missing_fields_outside_mock_mode(self):
        settings = Settings(_env_file=None)

        assert settings.validate_required_fields() == [
            "S3_BUCKET",
            "S3_ACCESS_KEY",
            "S3_SECRET_KEY",
        ]

    def test_mock_mode_only_needs_bucket(self):
        settings = Settings(_env_file=None, s3_mock_mode=True, s3_bucket="b")
        assert settings.validate_required_fields() == []

    def test_storage_config_carries_every_option(self):
        settings = Settings(
            _env_file=None,
            s3_access_key="ak",
            s3_secret_key="sk",
            s3_bucket="b",
            s3_endpoint_host="cdn.example.com",
            s3_endpoint_url="http://localhost:9000",
        )

        config = settings.storage_config()

        assert config.access_key == "ak"
        assert config.bucket == "b"
        assert config.endpoint_host == "cdn.example.com"
        assert config.endpoint_url == "http://localhost:9000"

    def test_secret_hidden_from_repr(self):
        settings = Settings(_env_file=None, s3_secret_key="hidden-secret")
        assert "hidden-secret" not in repr(settings)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestCreateFacade:
    """Tests for building a facade from settings."""

    def test_mock_mode_uses_in_memory_client(self):
        settings = Settings(_env_file=None, s3_mock_mode=True, s3_bucket="dev-bucket")

        facade = create_facade(settings)

        assert isinstance(facade.client, InMemoryObjectClient)
        assert facade.bucket == "dev-bucket"

    def test_real_mode_uses_s3_client(self):
        settings = Settings(
            _env_file=None,
            s3_access_key="ak",
            s3_secret_key="sk",
            s3_bucket="prod-bucket",
        )

        facade = create_facade(settings)

        assert isinstance(facade.client, S3ObjectClient)
        assert facade.public_url("x.txt") == "http://prod-bucket.s3.amazonaws.com/x.txt"

    def test_missing_credentials_raise(self):
        settings = Settings(_env_file=None, s3_bucket="b")

        with pytest.raises(ConfigurationError):
            create_facade(settings)

    def test_reads_environment_when_no_settings_given(self, monkeypatch):
        monkeypatch.setenv("S3_BUCKET", "from-env")
        monkeypatch.setenv("S3_MOCK_MODE", "true")

        facade = create_facade()

        assert facade.bucket == "from-env"
        assert isinstance(facade.client, InMemoryObjectClient)
