"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Issue Summary Service"
    debug: bool = False
    log_level: str = "info"

    # Authentication settings
    require_api_key: bool = False  # Set to True to enable API key authentication

    # API Keys for authentication (comma-separated string in env)
    api_keys_str: str = Field(default="dev-api-key", alias="api_keys")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def api_keys(self) -> List[str]:
        """Parse comma-separated API keys."""
        return [k.strip() for k in self.api_keys_str.split(",") if k.strip()]

    # Jira settings (application credential, not the invoking user's)
    jira_base_url: str = ""
    jira_email: str = ""
    jira_api_token: str = ""

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_api_version: str = "2023-06-01"
    summary_max_tokens: int = 256

    # Upstream calls
    request_timeout_seconds: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
