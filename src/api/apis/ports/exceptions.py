"""Domain exceptions for APIs bounded context."""


class ApiNotFoundError(Exception):
    """Raised when an Api is not visible to the requesting workspace.

    Unknown, soft-deleted, and foreign Apis are reported the same way.
    """

    pass
