"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors raised by repositories and
application services. The presentation layer maps them to HTTP errors.
"""


class WorkspaceNotFoundError(Exception):
    """Raised when no active workspace matches the caller's credential.

    Covers both missing and soft-deleted workspaces; callers cannot tell
    the two apart.
    """

    pass


class PermissionNotFoundError(Exception):
    """Raised when the resolved workspace has no permission with the given id.

    A permission that exists in another workspace is reported the same way.
    """

    pass


class PermissionUpdateFailedError(Exception):
    """Raised when the permission change could not be written to storage.

    No audit log entry is emitted when this is raised.
    """

    pass


class AuditLogNotRecordedError(Exception):
    """Raised when the permission was updated but its audit entry was not stored.

    Only raised under the strict audit delivery policy. The mutation has
    already committed when this is raised.
    """

    pass
