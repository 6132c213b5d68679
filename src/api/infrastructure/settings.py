"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_kernel.audit import AuditDeliveryPolicy


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        LATCHKEY_DB_HOST: Database host (default: localhost)
        LATCHKEY_DB_PORT: Database port (default: 5432)
        LATCHKEY_DB_DATABASE: Database name (default: latchkey)
        LATCHKEY_DB_USERNAME: Database user (default: latchkey)
        LATCHKEY_DB_PASSWORD: Database password (required in production)
        LATCHKEY_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        LATCHKEY_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="LATCHKEY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="latchkey", description="Database name")
    username: str = Field(default="latchkey", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OIDCSettings(BaseSettings):
    """OIDC provider settings for session token validation.

    Environment variables:
        LATCHKEY_OIDC_ISSUER_URL: Issuer URL (default: http://localhost:8080/realms/latchkey)
        LATCHKEY_OIDC_AUDIENCE: Expected audience claim (default: latchkey-dashboard)
        LATCHKEY_OIDC_USER_ID_CLAIM: Claim holding the user ID (default: sub)
        LATCHKEY_OIDC_USERNAME_CLAIM: Claim holding the username (default: preferred_username)
        LATCHKEY_OIDC_TENANT_CLAIM: Claim holding the tenant ID (default: tenant_id)
    """

    model_config = SettingsConfigDict(
        env_prefix="LATCHKEY_OIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    issuer_url: str = Field(
        default="http://localhost:8080/realms/latchkey",
        description="OIDC issuer URL",
    )
    audience: str = Field(
        default="latchkey-dashboard",
        description="Expected audience claim",
    )
    user_id_claim: str = Field(default="sub", description="User ID claim")
    username_claim: str = Field(
        default="preferred_username", description="Username claim"
    )
    tenant_claim: str = Field(default="tenant_id", description="Tenant ID claim")


class AuditSettings(BaseSettings):
    """Audit log delivery settings.

    Environment variables:
        LATCHKEY_AUDIT_DELIVERY_POLICY: strict, best_effort or outbox (default: strict)
        LATCHKEY_AUDIT_INGEST_URL: Ingestion endpoint; entries are only logged when unset
        LATCHKEY_AUDIT_INGEST_TOKEN: Bearer token for the ingestion endpoint
        LATCHKEY_AUDIT_TIMEOUT_SECONDS: Ingestion request timeout (default: 5)
        LATCHKEY_AUDIT_OUTBOX_POLL_INTERVAL_SECONDS: Outbox poll interval (default: 5)
        LATCHKEY_AUDIT_OUTBOX_BATCH_SIZE: Entries per outbox batch (default: 100)
        LATCHKEY_AUDIT_OUTBOX_MAX_RETRIES: Attempts before an entry is dead-lettered (default: 5)
    """

    model_config = SettingsConfigDict(
        env_prefix="LATCHKEY_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    delivery_policy: AuditDeliveryPolicy = Field(
        default=AuditDeliveryPolicy.STRICT,
        description="How audit entries for mutations are delivered",
    )
    ingest_url: str | None = Field(
        default=None,
        description="Audit log ingestion endpoint",
    )
    ingest_token: SecretStr | None = Field(
        default=None,
        description="Bearer token for the ingestion endpoint",
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="Ingestion request timeout",
        gt=0,
    )
    outbox_poll_interval_seconds: int = Field(
        default=5,
        description="How often the outbox worker polls for pending entries",
        ge=1,
    )
    outbox_batch_size: int = Field(
        default=100,
        description="Maximum entries per outbox batch",
        ge=1,
        le=1000,
    )
    outbox_max_retries: int = Field(
        default=5,
        description="Delivery attempts before an entry is moved to the DLQ",
        ge=1,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="LATCHKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Latchkey API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    support_email: str = Field(
        default="support@latchkey.dev",
        description="Support contact included in error messages",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oidc(self) -> OIDCSettings:
        """Get OIDC settings."""
        return get_oidc_settings()

    @property
    def audit(self) -> AuditSettings:
        """Get audit settings."""
        return get_audit_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_oidc_settings() -> OIDCSettings:
    """Get cached OIDC settings."""
    return OIDCSettings()


@lru_cache
def get_audit_settings() -> AuditSettings:
    """Get cached audit settings."""
    return AuditSettings()
