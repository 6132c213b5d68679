"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import AuditSettings, DatabaseSettings, OIDCSettings
from shared_kernel.audit import AuditDeliveryPolicy


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)

    def test_connection_string_omits_password(self):
        settings = DatabaseSettings(
            host="db", port=5433, database="keys", username="svc", password="hunter2"
        )
        assert settings.connection_string == "postgresql://svc@db:5433/keys"
        assert "hunter2" not in settings.connection_string


class TestDatabaseSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("LATCHKEY_DB_HOST", "postgres.internal")
        monkeypatch.setenv("LATCHKEY_DB_POOL_MAX_CONNECTIONS", "20")

        settings = DatabaseSettings()

        assert settings.host == "postgres.internal"
        assert settings.pool_max_connections == 20


class TestAuditSettings:
    """Tests for audit delivery configuration."""

    def test_defaults_to_strict_delivery_without_endpoint(self):
        settings = AuditSettings()
        assert settings.delivery_policy is AuditDeliveryPolicy.STRICT
        assert settings.ingest_url is None
        assert settings.ingest_token is None

    def test_policy_parsed_from_environment(self, monkeypatch):
        monkeypatch.setenv("LATCHKEY_AUDIT_DELIVERY_POLICY", "outbox")
        monkeypatch.setenv("LATCHKEY_AUDIT_INGEST_URL", "https://audit.example.com/v1")
        monkeypatch.setenv("LATCHKEY_AUDIT_INGEST_TOKEN", "s3cret")

        settings = AuditSettings()

        assert settings.delivery_policy is AuditDeliveryPolicy.OUTBOX
        assert settings.ingest_url == "https://audit.example.com/v1"
        assert settings.ingest_token.get_secret_value() == "s3cret"

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            AuditSettings(delivery_policy="sometimes")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            AuditSettings(timeout_seconds=0)

    def test_batch_size_bounds(self):
        with pytest.raises(ValidationError):
            AuditSettings(outbox_batch_size=0)
        with pytest.raises(ValidationError):
            AuditSettings(outbox_batch_size=1001)


class TestOIDCSettings:
    def test_claim_defaults(self):
        settings = OIDCSettings()
        assert settings.user_id_claim == "sub"
        assert settings.username_claim == "preferred_username"
        assert settings.tenant_claim == "tenant_id"
