"""Runtime settings read from the environment (and a `.env` file)."""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_summary.errors import ConfigError

ENV_PREFIX = "GITHUB_SUMMARY_"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TOKEN_FILE = "github_token.txt"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Where to talk to, where the token lives, and how noisy to be."""

    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="GitHub API base URL",
    )
    token_file: Path = Field(
        default=Path(DEFAULT_TOKEN_FILE),
        description="File holding the personal access token",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return value


def load_settings(env_file: Optional[str] = ".env", **overrides: Any) -> Settings:
    """Build :class:`Settings` from ``GITHUB_SUMMARY_*`` variables and *env_file*.

    Invalid values raise :class:`ConfigError`.
    """
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}"
            if err["loc"]
            else err["msg"]
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
