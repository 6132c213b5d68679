"""Session token validation for OIDC-issued JWTs.

Validates bearer tokens against the OIDC provider's JWKS (cached) and
extracts the caller's user id, username and tenant.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import httpx
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Validated session claims.

    Attributes:
        sub: The user identifier
        preferred_username: Display username, if the provider sent one
        tenant_id: The tenant the session is scoped to, if present
    """

    sub: str
    preferred_username: str | None
    tenant_id: str | None = None


class InvalidTokenError(Exception):
    """Raised when JWT validation fails."""

    pass


class JWTValidator:
    """Validates JWT tokens using the OIDC provider's JWKS.

    JWKS is fetched through the discovery document and cached for the
    configured TTL. Signature, expiry, issuer and audience are verified.
    """

    def __init__(
        self,
        issuer_url: str,
        audience: str,
        probe: JWTValidatorProbe,
        user_id_claim: str = "sub",
        username_claim: str = "preferred_username",
        tenant_claim: str = "tenant_id",
        jwks_cache_ttl: timedelta = timedelta(hours=24),
    ):
        """Initialize the JWT validator.

        Args:
            issuer_url: The OIDC issuer URL.
            audience: Expected audience claim value.
            probe: Observability probe for logging events.
            user_id_claim: Claim holding the user ID (default: sub).
            username_claim: Claim holding the username (default: preferred_username).
            tenant_claim: Claim holding the tenant ID (default: tenant_id).
            jwks_cache_ttl: How long to cache JWKS keys (default: 24 hours).
        """
        self._issuer_url = issuer_url.rstrip("/")
        self._audience = audience
        self._probe = probe
        self._user_id_claim = user_id_claim
        self._username_claim = username_claim
        self._tenant_claim = tenant_claim
        self._jwks_cache_ttl = jwks_cache_ttl

        self._jwks: dict[str, Any] | None = None
        self._jwks_fetched_at: datetime | None = None
        self._jwks_lock = asyncio.Lock()

    async def validate_token(self, token: str) -> TokenClaims:
        """Validate a JWT and return its claims.

        Args:
            token: The JWT token string.

        Returns:
            TokenClaims containing the validated claims.

        Raises:
            InvalidTokenError: If the token is malformed, expired, or fails verification.
        """
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError as e:
            self._probe.token_rejected(reason=f"Malformed token: {e}")
            raise InvalidTokenError(f"Invalid token format: {e}") from e

        if not unverified_header:
            self._probe.token_rejected(reason="Missing token header")
            raise InvalidTokenError("Invalid token: missing header")

        jwks = await self._get_jwks()
        claims = self._decode(token, jwks)
        return self._extract_claims(claims)

    def _decode(self, token: str, jwks: dict[str, Any]) -> dict[str, Any]:
        """Verify the token signature and registered claims."""
        try:
            return jwt.decode(
                token=token,
                key=jwks,
                algorithms=["RS256"],
                audience=self._audience,
                issuer=self._issuer_url,
                options={
                    "verify_signature": True,
                    "verify_aud": True,
                    "verify_iss": True,
                    "verify_exp": True,
                    "verify_iat": True,
                },
            )
        except ExpiredSignatureError as e:
            self._probe.token_rejected(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            error_msg = str(e).lower()
            if "audience" in error_msg:
                self._probe.token_rejected(reason="Invalid audience")
                raise InvalidTokenError("Invalid audience claim") from e
            if "issuer" in error_msg:
                self._probe.token_rejected(reason="Invalid issuer")
                raise InvalidTokenError("Invalid issuer claim") from e
            self._probe.token_rejected(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            if "signature" in str(e).lower():
                self._probe.token_rejected(reason="Invalid signature")
                raise InvalidTokenError("Invalid token signature") from e
            self._probe.token_rejected(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

    def _extract_claims(self, claims: dict[str, Any]) -> TokenClaims:
        """Map verified raw claims onto TokenClaims."""
        user_id = claims.get(self._user_id_claim)
        if user_id is None:
            self._probe.token_rejected(
                reason=f"Missing {self._user_id_claim} claim"
            )
            raise InvalidTokenError(f"Missing required claim: {self._user_id_claim}")

        username = claims.get(self._username_claim)
        tenant_id = claims.get(self._tenant_claim)

        self._probe.token_accepted(
            user_id=str(user_id),
            tenant_id=str(tenant_id) if tenant_id is not None else None,
        )

        return TokenClaims(
            sub=str(user_id),
            preferred_username=str(username) if username is not None else None,
            tenant_id=str(tenant_id) if tenant_id is not None else None,
        )

    async def _get_jwks(self) -> dict[str, Any]:
        """Get JWKS, fetching from the issuer if the cache expired.

        Raises:
            InvalidTokenError: If JWKS cannot be fetched.
        """
        if self._is_cache_valid():
            self._probe.signing_keys_cached()
            return self._jwks  # type: ignore[return-value]

        async with self._jwks_lock:
            # Another request may have refreshed the cache while we waited
            if self._is_cache_valid():
                self._probe.signing_keys_cached()
                return self._jwks  # type: ignore[return-value]

            return await self._fetch_jwks()

    def _is_cache_valid(self) -> bool:
        if self._jwks is None or self._jwks_fetched_at is None:
            return False

        now = datetime.now(tz=timezone.utc)
        return (now - self._jwks_fetched_at) < self._jwks_cache_ttl

    async def _fetch_jwks(self) -> dict[str, Any]:
        """Fetch JWKS via the OpenID Connect discovery document.

        Raises:
            InvalidTokenError: If JWKS cannot be fetched.
        """
        try:
            async with httpx.AsyncClient() as client:
                config_response = await client.get(
                    f"{self._issuer_url}/.well-known/openid-configuration"
                )
                config_response.raise_for_status()
                jwks_uri = config_response.json().get("jwks_uri")
                if not jwks_uri:
                    self._probe.signing_keys_unavailable(
                        error="Missing jwks_uri in OpenID configuration"
                    )
                    raise InvalidTokenError(
                        "OIDC provider missing jwks_uri in configuration"
                    )

                jwks_response = await client.get(jwks_uri)
                jwks_response.raise_for_status()
                jwks = jwks_response.json()
        except httpx.HTTPError as e:
            self._probe.signing_keys_unavailable(error=str(e))
            raise InvalidTokenError(
                f"Failed to fetch JWKS from OIDC provider: {e}"
            ) from e

        self._jwks = jwks
        self._jwks_fetched_at = datetime.now(tz=timezone.utc)
        self._probe.signing_keys_refreshed(key_count=len(jwks.get("keys", [])))
        return jwks
