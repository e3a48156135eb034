"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSACTION_FEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend configuration
    backend_url: str | None = Field(
        default=None,
        description="Base URL of the transaction backend. If unset, an in-memory backend is used",
    )
    request_timeout_seconds: int = Field(
        default=10, description="Timeout for backend requests in seconds"
    )
    log_requests: bool = Field(
        default=False, description="Log every outgoing backend request at INFO level"
    )

    # In-memory backend configuration
    data_file: str | None = Field(
        default=None,
        description="JSON file with 'employees' and 'transactions' lists for the in-memory backend",
    )
    page_size: int = Field(
        default=5, description="Number of transactions per page served by the in-memory backend"
    )
    simulated_latency_ms: int = Field(
        default=0, description="Artificial delay added to every in-memory backend call"
    )

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str | None) -> str | None:
        """Validate backend URL is an http(s) URL and strip the trailing slash."""
        if v is None or not v.strip():
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("backend_url must start with 'http://' or 'https://'")
        return v.rstrip("/")

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate page size is positive."""
        if v < 1:
            raise ValueError("page_size must be at least 1")
        return v

    @field_validator("simulated_latency_ms", "request_timeout_seconds")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate durations are not negative."""
        if v < 0:
            raise ValueError("durations must not be negative")
        return v
