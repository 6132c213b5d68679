"""HTTP routes for listing an Api's keys."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from apis.application.services import KeyDirectoryService
from apis.dependencies.key_directory import get_key_directory_service
from apis.domain.value_objects import MAX_PAGE_SIZE, ApiId, KeyFilter, PageRequest
from apis.ports.exceptions import ApiNotFoundError
from apis.presentation.keys.models import KeyListResponse
from iam.application.value_objects import RootKeyPrincipal
from iam.dependencies.root_key import get_root_key_principal
from infrastructure.settings import get_settings
from shared_kernel.errors import ErrorCode, error_detail, with_support_contact

router = APIRouter(tags=["keys"])


def _api_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error_detail(
            ErrorCode.NOT_FOUND, "We are unable to find the requested api."
        ),
    )


@router.get(
    "/{api_id}/keys",
    status_code=status.HTTP_200_OK,
    response_model_by_alias=True,
    responses={
        401: {"description": "Missing or invalid root key"},
        404: {"description": "Api or workspace not found"},
        422: {"description": "limit or offset out of range"},
        500: {"description": "Internal server error"},
    },
)
async def list_keys(
    api_id: str,
    principal: Annotated[RootKeyPrincipal, Depends(get_root_key_principal)],
    service: Annotated[KeyDirectoryService, Depends(get_key_directory_service)],
    owner_id: Annotated[
        str | None, Query(alias="ownerId", description="Only keys with this owner")
    ] = None,
    limit: Annotated[
        int, Query(ge=1, le=MAX_PAGE_SIZE, description="Page size")
    ] = MAX_PAGE_SIZE,
    offset: Annotated[int, Query(ge=0, description="Keys to skip")] = 0,
) -> KeyListResponse:
    """List the keys of an Api in the root key's workspace.

    Keys are ordered by creation time. total counts every key matching the
    filter, regardless of limit and offset.

    Raises:
        HTTPException: 404 if the Api is unknown, deleted, or in another workspace
        HTTPException: 500 for unexpected errors
    """
    try:
        api = ApiId.from_string(api_id)
    except ValueError:
        raise _api_not_found()

    try:
        page = await service.list_keys(
            api_id=api,
            workspace_id=principal.workspace.id,
            filters=KeyFilter(owner_id=owner_id),
            page=PageRequest(limit=limit, offset=offset),
        )
    except ApiNotFoundError:
        raise _api_not_found()
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail(
                ErrorCode.INTERNAL_SERVER_ERROR,
                with_support_contact(
                    "We are unable to list the keys.", get_settings().support_email
                ),
            ),
        )

    return KeyListResponse.from_domain(page, api)
