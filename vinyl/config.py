"""Application configuration."""

from typing import Literal, Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """Album service connection configuration."""

    # Root of the album service; endpoint paths are joined onto it
    base_url: str = "http://localhost:8000/"

    # Transport timeout in seconds for every request
    timeout: float = 10.0

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Relative endpoint paths only join correctly onto a trailing slash."""
        return v if v.endswith("/") else f"{v}/"


class CSRFSettings(BaseModel):
    """Anti-forgery token configuration.

    The service sets the token in a cookie and expects it echoed back in a
    header on every mutating request.
    """

    cookie_name: str = "XSRF-TOKEN"
    header_name: str = "X-XSRF-TOKEN"


class CacheSettings(BaseModel):
    """Album page cache configuration."""

    # Maximum number of distinct filters kept; None keeps every page
    # until the next mutation clears the cache
    max_entries: Optional[int] = None


class IdentitySettings(BaseModel):
    """Identity configuration."""

    # Bearer token to start the session with (e.g. one saved by a prior login)
    # Can be set via IDENTITY__TOKEN env var
    token: Optional[str] = None


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested
    sections:

        API__BASE_URL=https://albums.example.com
        API__TIMEOUT=5
        CACHE__MAX_ENTRIES=50
        IDENTITY__TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: APISettings = APISettings()
    csrf: CSRFSettings = CSRFSettings()
    cache: CacheSettings = CacheSettings()
    identity: IdentitySettings = IdentitySettings()
    observability: ObservabilitySettings = ObservabilitySettings()
