"""Session request pipeline for dashboard (RPC) routes.

Each step is a separate dependency so FastAPI runs them in a fixed order
and tests can override any one of them:

1. get_session_user authenticates the session token
2. get_audit_context extracts where the request came from
3. get_workspace_scope combines both into the explicit WorkspaceScope
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from iam.application.observability import AuthenticationProbe
from iam.application.value_objects import SessionUser, WorkspaceScope
from iam.dependencies.authentication import (
    bearer_scheme,
    get_authentication_probe,
    get_jwt_validator,
)
from iam.domain.value_objects import TenantId, UserId
from shared_kernel.audit import AuditContext
from shared_kernel.auth import InvalidTokenError, JWTValidator
from shared_kernel.errors import ErrorCode, error_detail


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error_detail(ErrorCode.UNAUTHORIZED, message),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_session_user(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> SessionUser:
    """Authenticate the caller's session token.

    Args:
        validator: JWT validator for token validation
        auth_probe: Authentication probe for observability
        credentials: Bearer credentials from the Authorization header

    Returns:
        SessionUser with the user and tenant from the token

    Raises:
        HTTPException 401: If the token is missing, invalid, or carries no
            tenant
    """
    if credentials is None:
        auth_probe.authentication_failed(reason="Missing authorization")
        raise _unauthorized("Not authenticated")

    try:
        claims = await validator.validate_token(credentials.credentials)
    except InvalidTokenError as e:
        auth_probe.authentication_failed(reason=str(e))
        raise _unauthorized(str(e)) from e

    try:
        tenant_id = TenantId.from_string(claims.tenant_id or "")
    except ValueError:
        auth_probe.authentication_failed(reason="Missing tenant claim")
        raise _unauthorized("Session is not scoped to a tenant")

    try:
        user_id = UserId.from_string(claims.sub)
    except ValueError:
        auth_probe.authentication_failed(reason="Missing subject claim")
        raise _unauthorized("Session has no subject")

    username = claims.preferred_username or claims.sub
    auth_probe.user_authenticated(
        user_id=claims.sub, username=username, tenant_id=claims.tenant_id
    )
    return SessionUser(
        user_id=user_id,
        username=username,
        tenant_id=tenant_id,
    )


def get_audit_context(request: Request) -> AuditContext:
    """Extract the caller's location and user agent for audit entries.

    The location is the first X-Forwarded-For hop (the original client when
    running behind proxies), falling back to the direct peer address.
    """
    location: str | None = None
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        location = forwarded_for.split(",")[0].strip() or None
    if location is None and request.client is not None:
        location = request.client.host

    return AuditContext(
        location=location,
        user_agent=request.headers.get("user-agent"),
    )


def get_workspace_scope(
    user: Annotated[SessionUser, Depends(get_session_user)],
    audit: Annotated[AuditContext, Depends(get_audit_context)],
) -> WorkspaceScope:
    """Build the explicit scope handed to workspace mutations."""
    return WorkspaceScope(
        tenant_id=user.tenant_id,
        user_id=user.user_id,
        audit=audit,
    )
