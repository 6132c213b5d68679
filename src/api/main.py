"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from apis.presentation import router as apis_router
from iam.presentation import router as iam_router
from infrastructure.audit import AuditLogOutboxHandler
from infrastructure.audit_dependencies import get_audit_log_ingestor
from infrastructure.database.dependencies import (
    close_database_connections,
    get_write_sessionmaker,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.outbox import OutboxWorker
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from shared_kernel.audit import AuditDeliveryPolicy
from shared_kernel.outbox.observability import DefaultOutboxWorkerProbe


@asynccontextmanager
async def latchkey_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Outbox worker lifecycle (only under the outbox audit delivery policy)
    - Database engine disposal on shutdown (engines are created lazily)
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)

    probe = DefaultStartupProbe()
    audit = settings.audit
    probe.application_started(settings.app_name, audit.delivery_policy.value)
    if audit.ingest_url is None:
        probe.audit_ingestion_not_configured()

    worker: OutboxWorker | None = None
    if audit.delivery_policy is AuditDeliveryPolicy.OUTBOX:
        worker = OutboxWorker(
            session_factory=get_write_sessionmaker(),
            handler=AuditLogOutboxHandler(ingestor=get_audit_log_ingestor()),
            probe=DefaultOutboxWorkerProbe(),
            poll_interval_seconds=audit.outbox_poll_interval_seconds,
            batch_size=audit.outbox_batch_size,
            max_retries=audit.outbox_max_retries,
        )
        await worker.start()
        probe.outbox_worker_enabled(audit.outbox_poll_interval_seconds)

    yield

    if worker is not None:
        await worker.stop()
    await close_database_connections()
    probe.application_stopped()


app = FastAPI(
    title="Latchkey API",
    description="Key directory and RBAC permission management for API workspaces",
    version=__version__,
    lifespan=latchkey_lifespan,
)

# Public API (root key auth) and dashboard RPC (session auth)
app.include_router(apis_router)
app.include_router(iam_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
