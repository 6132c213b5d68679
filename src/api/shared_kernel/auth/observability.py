"""Domain probe for session token validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class JWTValidatorProbe(Protocol):
    """Domain probe for session token validation."""

    def token_accepted(self, user_id: str, tenant_id: str | None) -> None:
        """Record that a session token passed every check."""
        ...

    def token_rejected(self, reason: str) -> None:
        """Record why a session token was refused."""
        ...

    def signing_keys_refreshed(self, key_count: int) -> None:
        """Record that the issuer's signing keys were downloaded."""
        ...

    def signing_keys_cached(self) -> None:
        """Record that cached signing keys were reused."""
        ...

    def signing_keys_unavailable(self, error: str) -> None:
        """Record that the issuer's signing keys could not be downloaded."""
        ...

    def with_context(self, context: ObservationContext) -> JWTValidatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultJWTValidatorProbe:
        return DefaultJWTValidatorProbe(logger=self._logger, context=context)

    def token_accepted(self, user_id: str, tenant_id: str | None) -> None:
        self._logger.info(
            "session_token_accepted",
            token_user_id=user_id,
            token_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def token_rejected(self, reason: str) -> None:
        self._logger.warning(
            "session_token_rejected", reason=reason, **self._get_context_kwargs()
        )

    def signing_keys_refreshed(self, key_count: int) -> None:
        self._logger.info(
            "oidc_signing_keys_refreshed",
            key_count=key_count,
            **self._get_context_kwargs(),
        )

    def signing_keys_cached(self) -> None:
        self._logger.debug("oidc_signing_keys_cached", **self._get_context_kwargs())

    def signing_keys_unavailable(self, error: str) -> None:
        self._logger.error(
            "oidc_signing_keys_unavailable", error=error, **self._get_context_kwargs()
        )
