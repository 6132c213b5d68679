"""Unit tests for audit log ingestor selection."""

from unittest.mock import patch

from pydantic import SecretStr

from infrastructure import audit_dependencies
from infrastructure.audit import HttpAuditLogIngestor, LoggingAuditLogIngestor
from infrastructure.settings import AuditSettings


class TestGetAuditLogIngestor:
    def test_logs_locally_without_ingest_url(self):
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=AuditSettings()
        ):
            ingestor = audit_dependencies.get_audit_log_ingestor()

        assert isinstance(ingestor, LoggingAuditLogIngestor)

    def test_uses_http_ingestor_when_configured(self):
        settings = AuditSettings(
            ingest_url="https://audit.example.com/v1",
            ingest_token=SecretStr("tok"),
        )
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=settings
        ):
            ingestor = audit_dependencies.get_audit_log_ingestor()

        assert isinstance(ingestor, HttpAuditLogIngestor)
