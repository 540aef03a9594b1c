"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from slack_gitlab_bridge import __version__
from slack_gitlab_bridge.config import TRIGGER_TOKEN_PREFIX, Settings, get_settings
from slack_gitlab_bridge.logging_config import configure_logging
from slack_gitlab_bridge.slack.router import router as slack_router

logger = logging.getLogger(__name__)


def log_configuration(settings: Settings) -> None:
    """Log which credentials are configured, never their values."""
    missing = settings.missing_credentials()
    if missing:
        logger.warning("Missing configuration: %s", ", ".join(missing))

    token = settings.gitlab_trigger_token
    if token and not token.startswith(TRIGGER_TOKEN_PREFIX):
        logger.warning(
            "GITLAB_TRIGGER_TOKEN does not look like a pipeline trigger token (%s...)",
            TRIGGER_TOKEN_PREFIX,
        )

    logger.info(
        "Configuration loaded",
        extra={
            "gitlab_url": settings.gitlab_url,
            "gitlab_project_id": settings.gitlab_project_id,
            "environment": settings.environment,
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    log_configuration(settings)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Slack GitLab Bridge",
    version=__version__,
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for the hosting platform and local development."""
    return {
        "status": "ok",
        "service": "slack-gitlab-bridge",
        "version": __version__,
    }
