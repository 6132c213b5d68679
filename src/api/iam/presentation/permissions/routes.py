"""HTTP routes for RBAC permission management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from iam.application.services import PermissionService
from iam.application.value_objects import WorkspaceScope
from iam.dependencies.permission import get_permission_service
from iam.dependencies.session import get_workspace_scope
from iam.domain.value_objects import PermissionId
from iam.ports.exceptions import (
    AuditLogNotRecordedError,
    PermissionNotFoundError,
    PermissionUpdateFailedError,
    WorkspaceNotFoundError,
)
from iam.presentation.permissions.models import UpdatePermissionRequest
from infrastructure.settings import get_settings
from shared_kernel.errors import ErrorCode, error_detail, with_support_contact

router = APIRouter(tags=["permissions"])


def _not_found(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error_detail(
            ErrorCode.NOT_FOUND,
            with_support_contact(message, get_settings().support_email),
        ),
    )


def _internal_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_detail(
            ErrorCode.INTERNAL_SERVER_ERROR,
            with_support_contact(message, get_settings().support_email),
        ),
    )


@router.post(
    "/rbac.updatePermission",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        401: {"description": "Missing or invalid session"},
        404: {"description": "Workspace or permission not found"},
        422: {"description": "Invalid permission name or payload"},
        500: {"description": "Update failed or audit log not recorded"},
    },
)
async def update_permission(
    request: UpdatePermissionRequest,
    scope: Annotated[WorkspaceScope, Depends(get_workspace_scope)],
    service: Annotated[PermissionService, Depends(get_permission_service)],
) -> None:
    """Rename a permission in the caller's workspace.

    Every successful update leaves exactly one ``permission.update`` audit
    log entry.

    Args:
        request: Permission id, new name and description
        scope: Caller's tenant, user and audit context
        service: Permission service for orchestration

    Raises:
        HTTPException: 404 if the workspace or permission is not found
        HTTPException: 500 if the update or its audit entry failed
    """
    try:
        permission_id = PermissionId.from_string(request.id)
    except ValueError:
        raise _not_found("We are unable to find the correct permission.")

    try:
        await service.update_permission(
            scope=scope,
            permission_id=permission_id,
            name=request.name,
            description=request.description,
        )
    except WorkspaceNotFoundError:
        raise _not_found("We are unable to find the correct workspace.")
    except PermissionNotFoundError:
        raise _not_found("We are unable to find the correct permission.")
    except PermissionUpdateFailedError:
        raise _internal_error("We are unable to update the permission.")
    except AuditLogNotRecordedError:
        raise _internal_error(
            "The permission was updated but the audit log could not be recorded."
        )
    except HTTPException:
        raise
    except Exception:
        raise _internal_error("We are unable to update the permission.")
