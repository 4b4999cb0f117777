"""Configuration management for gh-act."""

import tempfile
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_act.core.constants import API_VERSION, CMD, DEFAULT_USER_AGENT, APIConstants


class Config(BaseSettings):
    """Application configuration."""

    token: SecretStr | None = Field(default=None, alias="GH_ACT_TOKEN", description="GitHub authentication token")
    auth_token_file: Path = Field(
        default_factory=lambda: Path.cwd() / ".auth-token",
        alias="GH_ACT_TOKEN_FILE",
        description="File holding the GitHub authentication token",
    )

    # Cache Configuration
    cache_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()) / CMD,
        alias="GH_ACT_CACHE_DIR",
        description="Directory holding cached API responses",
    )
    cache_enabled: bool = Field(
        default=True,
        alias="GH_ACT_CACHE",
        description="Read and write cached API responses",
    )

    # Diagnostics
    debug: bool = Field(
        default=False,
        alias="GH_ACT_DEBUG",
        description="Dump HTTP requests and responses to stderr",
    )
    test_mode: bool = Field(
        default=False,
        alias="GH_ACT_TEST",
        description="Automated test execution mode (requires a token, silences HTTP dumps)",
    )

    # API Configuration
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="GH_ACT_USER_AGENT")
    api_version: str = Field(default=API_VERSION, alias="GH_ACT_API_VERSION")
    request_timeout: float = Field(
        default=float(APIConstants.REQUEST_TIMEOUT),
        alias="GH_ACT_TIMEOUT",
        description="Request timeout in seconds",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("test_mode", mode="before")
    @classmethod
    def parse_test_mode(cls, v: Any) -> Any:
        """Any non-empty value other than an explicit false enables test mode."""
        if isinstance(v, str):
            return v.strip().lower() not in ("", "0", "false", "no", "off")
        return v


def load_config(**overrides: Any) -> Config:
    """Load configuration from environment and .env file.

    Args:
        overrides: Field values that take precedence over the environment

    """
    return Config(**{key: value for key, value in overrides.items() if value is not None})
