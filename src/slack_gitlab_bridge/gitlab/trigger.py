"""GitLab pipeline trigger client.

Issues exactly one ``POST /api/v4/projects/:id/trigger/pipeline`` per call.
The trigger token travels in the JSON body, so no auth header is sent.
There are no retries: a failure is reported back to Slack instead.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from slack_gitlab_bridge.config import TRIGGER_TOKEN_PREFIX, Settings
from slack_gitlab_bridge.gitlab.errors import CITriggerError
from slack_gitlab_bridge.models.command import TestConfig
from slack_gitlab_bridge.models.gitlab import PipelineResult

logger = logging.getLogger(__name__)


def trigger_url(settings: Settings) -> str:
    """Return the pipeline trigger endpoint for the configured project.

    Project paths such as ``group/project`` are URL-encoded, numeric IDs
    pass through unchanged.
    """
    project = quote(settings.gitlab_project_id, safe="")
    return f"{settings.gitlab_url}/api/v4/projects/{project}/trigger/pipeline"


def build_trigger_payload(
    config: TestConfig, slack_user: str, slack_channel: str, settings: Settings
) -> dict:
    """Build the JSON body for the trigger API."""
    return {
        "token": settings.gitlab_trigger_token,
        "ref": config.branch,
        "variables": {
            "TRIGGERED_BY_SLACK": "true",
            "SLACK_USER": slack_user,
            "SLACK_CHANNEL": slack_channel,
            "TEST_SUITE": config.test_suite.value,
            "TEST_ENVIRONMENT": config.environment.value,
        },
    }


def _build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.gitlab_timeout))


async def trigger_pipeline(
    config: TestConfig, slack_user: str, slack_channel: str, settings: Settings
) -> PipelineResult:
    """Trigger a GitLab pipeline for a parsed test command.

    Args:
        config: Suite, environment, and branch to run.
        slack_user: Slack user ID of the requester, passed as SLACK_USER.
        slack_channel: Slack channel ID, passed as SLACK_CHANNEL.
        settings: Settings carrying the GitLab URL, project, and trigger token.

    Returns:
        The created pipeline, including its id and web_url.

    Raises:
        CITriggerError: GitLab returned a non-2xx status, an unreadable body,
            or the request failed in transit.
    """
    url = trigger_url(settings)
    payload = build_trigger_payload(config, slack_user, slack_channel, settings)

    if settings.gitlab_trigger_token and not settings.gitlab_trigger_token.startswith(
        TRIGGER_TOKEN_PREFIX
    ):
        logger.warning("GitLab trigger token does not start with %r", TRIGGER_TOKEN_PREFIX)

    logger.info(
        "Triggering GitLab pipeline",
        extra={
            "url": url,
            "ref": config.branch,
            "test_suite": config.test_suite.value,
            "test_environment": config.environment.value,
            "slack_user": slack_user,
            "slack_channel": slack_channel,
            "token_present": bool(settings.gitlab_trigger_token),
        },
    )

    try:
        async with _build_client(settings) as client:
            response = await client.post(url, json=payload)
    except httpx.HTTPError as exc:
        logger.error("GitLab trigger request failed: %s", exc, exc_info=True)
        raise CITriggerError(f"GitLab request failed: {exc}") from exc

    if not response.is_success:
        body = response.text
        logger.error(
            "GitLab trigger returned %d",
            response.status_code,
            extra={"status_code": response.status_code, "response_body": body},
        )
        raise CITriggerError(
            f"GitLab API error: {response.status_code} - {body}",
            status_code=response.status_code,
            body=body,
        )

    try:
        pipeline = PipelineResult.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise CITriggerError(
            f"Unexpected GitLab response: {exc}",
            status_code=response.status_code,
            body=response.text,
        ) from exc

    logger.info(
        "Pipeline %s triggered", pipeline.id, extra={"web_url": pipeline.web_url}
    )
    return pipeline
