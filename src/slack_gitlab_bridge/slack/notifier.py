"""Slack notifications for pipeline trigger outcomes.

All functions are fire-and-forget: they catch and log errors but never raise,
so a failed notification cannot change the response sent back to Slack.
"""

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError

from slack_gitlab_bridge.config import Settings
from slack_gitlab_bridge.models.command import TestConfig
from slack_gitlab_bridge.models.gitlab import PipelineResult
from slack_gitlab_bridge.slack.client import get_slack_client

logger = logging.getLogger(__name__)


def format_confirmation(user_id: str, config: TestConfig, pipeline: PipelineResult) -> str:
    """Build the message announcing a triggered pipeline."""
    return (
        f"Tests triggered by <@{user_id}>!\n"
        f"• *Suite:* {config.test_suite.value}\n"
        f"• *Environment:* {config.environment.value}\n"
        f"• *Branch:* {config.branch}\n"
        f"• *Pipeline:* {pipeline.web_url}"
    )


def format_failure(reason: str) -> str:
    """Build the message reporting a failed trigger."""
    return f"Failed to trigger tests: {reason}"


async def send_message(channel_id: str, text: str, settings: Settings) -> None:
    """Post a message to a channel as the bot user.

    Args:
        channel_id: Slack channel ID.
        text: Message text (Slack mrkdwn).
        settings: Settings carrying the bot token.
    """
    try:
        client = await get_slack_client(settings)
        await client.chat_postMessage(channel=channel_id, text=text, as_user=True)
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.warning(
            "Slack API rejected message to %s: %s", channel_id, error_code or exc
        )
    except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError):
        logger.warning("Failed to send Slack message to %s", channel_id, exc_info=True)


async def notify_triggered(
    channel_id: str,
    user_id: str,
    config: TestConfig,
    pipeline: PipelineResult,
    settings: Settings,
) -> None:
    """Post the confirmation for a successfully triggered pipeline."""
    await send_message(channel_id, format_confirmation(user_id, config, pipeline), settings)


async def notify_failed(channel_id: str, reason: str, settings: Settings) -> None:
    """Post the reason a pipeline could not be triggered."""
    await send_message(channel_id, format_failure(reason), settings)
