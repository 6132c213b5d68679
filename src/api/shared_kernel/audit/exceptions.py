"""Exceptions raised by audit log ingestion."""


class AuditLogIngestionError(Exception):
    """Raised when audit log entries could not be handed to the audit store."""

    pass
