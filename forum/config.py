"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Authentication configuration.

    Tokens are issued by the external auth service; the API only verifies them
    with the shared secret.
    """

    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    # Clock skew tolerated when checking exp
    jwt_leeway_seconds: int = Field(default=0, ge=0)


class ForumSettings(BaseModel):
    """Forum behaviour configuration."""

    # Hex characters kept after the prefix of generated IDs (thread-<hex>)
    id_length: int = Field(default=16, ge=8, le=32)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    service_name: str = "forum-api"

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        ENVIRONMENT=production
        AUTH__JWT_SECRET=...
        FORUM__ID_LENGTH=21
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__JWT_SECRET syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 5000

    # Nested settings
    auth: AuthSettings = AuthSettings()
    forum: ForumSettings = ForumSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
