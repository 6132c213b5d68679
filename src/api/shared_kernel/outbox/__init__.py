"""Transactional outbox contract.

Side effects that must happen exactly when a database mutation commits
(such as recording an audit log entry) are written to the outbox table in
the same transaction, then delivered asynchronously by the outbox worker.
"""

from shared_kernel.outbox.ports import IOutboxRepository, OutboxEventHandler
from shared_kernel.outbox.value_objects import OutboxEntry

__all__ = ["IOutboxRepository", "OutboxEntry", "OutboxEventHandler"]
