"""Runtime configuration helpers for the guidelines server."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ExtractionConfig

DEFAULT_GUIDELINES_URL = "https://swift.org/documentation/api-design-guidelines/"


class Settings(BaseSettings):
    """Central configuration for fetching, extraction and serving."""

    guidelines_url: str = DEFAULT_GUIDELINES_URL
    server_name: str = "swift-api-guidelines"
    server_version: str = "1.0.0"
    tool_name: str = "readSwiftGuidelines"
    request_timeout: float = Field(default=30.0, gt=0)
    section_line_limit: int = Field(default=50, gt=0)
    not_found_sample_chars: int = Field(default=500, ge=0)
    transport: str = "stdio"  # stdio|sse|streamable-http
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GUIDELINES_MCP_",
        extra="ignore",
    )

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, value: str) -> str:
        allowed = {"stdio", "sse", "streamable-http"}
        if value not in allowed:
            raise ValueError(f"Unsupported transport '{value}'. Allowed: {allowed}")
        return value

    def extraction_config(self) -> ExtractionConfig:
        """Build the immutable pipeline configuration from these settings."""
        return ExtractionConfig(
            line_cap=self.section_line_limit,
            sample_length=self.not_found_sample_chars,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
