"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# GitLab pipeline trigger tokens are issued with this prefix
TRIGGER_TOKEN_PREFIX = "glptt-"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Instances are frozen: settings are read once at startup and passed to the
    operations that need them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""

    # GitLab
    gitlab_project_id: str = ""
    gitlab_trigger_token: str = ""
    gitlab_url: str = "https://gitlab.com"
    gitlab_timeout: float | None = None  # seconds; None waits indefinitely

    # App
    environment: str = "development"
    log_level: str = "INFO"

    @field_validator("gitlab_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or "https://gitlab.com"

    def missing_credentials(self) -> list[str]:
        """Return the names of required credentials that are empty."""
        required = {
            "SLACK_SIGNING_SECRET": self.slack_signing_secret,
            "SLACK_BOT_TOKEN": self.slack_bot_token,
            "GITLAB_PROJECT_ID": self.gitlab_project_id,
            "GITLAB_TRIGGER_TOKEN": self.gitlab_trigger_token,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
