"""Configuration for the FlexDB client."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://flexdb.co/api/v1"


def _validate_endpoint(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("Endpoint must start with http:// or https://")
    return v


class FlexDBConfig(BaseModel):
    """Client configuration.

    Immutable once built. The client never reads the environment on its
    own; use FlexDBSettings for that.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = Field(default=10.0, ge=1.0, le=300.0)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint URL format."""
        return _validate_endpoint(v)


class FlexDBSettings(BaseSettings):
    """Environment-backed settings for the CLI and test harnesses.

    All settings can be configured via environment variables with the
    FLEXDB_ prefix, or from a .env file in the working directory:

        - FLEXDB_API_KEY: account API key
        - FLEXDB_ENDPOINT: service base URL
        - FLEXDB_STORE_ID: default store for document commands
    """

    model_config = SettingsConfigDict(
        env_prefix="FLEXDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None)
    endpoint: str = Field(default=DEFAULT_ENDPOINT)
    store_id: str | None = Field(default=None)
    timeout: float = Field(default=10.0, ge=1.0, le=300.0)

    log_level: str = Field(default="WARNING")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint URL format."""
        return _validate_endpoint(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    def to_config(self) -> FlexDBConfig:
        """Build the immutable client configuration from these settings."""
        return FlexDBConfig(
            api_key=self.api_key,
            endpoint=self.endpoint,
            timeout=self.timeout,
        )
