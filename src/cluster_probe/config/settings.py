"""Configuration management with Pydantic Settings.

Values are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)

This is the only place the process environment is read. Everything below the
CLI receives endpoint, token and timeout as explicit arguments.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class WorkspaceSettings(BaseSettings):
    """Workspace endpoint and credentials.

    DATABRICKS_HOST is the workspace URL (e.g. https://dbc-xxxx.cloud.databricks.com),
    DATABRICKS_TOKEN a personal access token. CLUSTER_ID names the cluster the
    Spark Connect flow would attach to; the REST probe only reports on it.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATABRICKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="", description="Workspace base URL")
    token: SecretStr = Field(default=SecretStr(""), description="Personal access token")
    cluster_id: str | None = Field(
        default=None,
        alias="CLUSTER_ID",
        description="Target compute cluster identifier",
    )

    @field_validator("host")
    @classmethod
    def strip_host(cls, v: str) -> str:
        return v.strip()

    @field_validator("cluster_id")
    @classmethod
    def blank_cluster_id_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_configured(self) -> bool:
        """Check that both host and token are present."""
        return bool(self.host) and bool(self.token.get_secret_value())


class ProbeSettings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    Workspace settings use the DATABRICKS_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application metadata
    app_name: str = Field(default="cluster-probe", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.TEXT, description="Logging format")

    # Probe configuration
    timeout_seconds: float = Field(
        default=20.0,
        alias="PROBE_TIMEOUT_SECONDS",
        description="Timeout for the cluster listing call",
    )
    skip_tls_verify: bool = Field(
        default=False,
        alias="PROBE_SKIP_TLS_VERIFY",
        description="Disable TLS peer verification (intercepting proxies)",
    )

    # Nested settings
    workspace: WorkspaceSettings = Field(default_factory=WorkspaceSettings)

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure the timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be greater than zero")
        return v


@lru_cache
def get_settings() -> ProbeSettings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return ProbeSettings()
