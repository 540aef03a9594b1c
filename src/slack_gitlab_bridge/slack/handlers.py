"""Slack event dispatch and message filtering logic."""

import json
import logging

from fastapi.responses import JSONResponse
from pydantic import ValidationError

from slack_gitlab_bridge.commands import parse_test_command
from slack_gitlab_bridge.config import Settings
from slack_gitlab_bridge.gitlab import CITriggerError, trigger_pipeline
from slack_gitlab_bridge.models.slack import MessageEvent, SlackPayload
from slack_gitlab_bridge.slack.notifier import notify_failed, notify_triggered
from slack_gitlab_bridge.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)

# Public channel IDs start with "C"; DMs ("D") and group DMs ("G") do not.
PUBLIC_CHANNEL_PREFIX = "C"


def parse_payload(body: bytes) -> SlackPayload | None:
    """Parse a raw request body into a SlackPayload.

    Returns None for bodies that are not a JSON object.
    """
    try:
        data = json.loads(body) if body else None
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Request body is not valid JSON (%d bytes)", len(body))
        return None
    if not isinstance(data, dict):
        return None
    return SlackPayload.model_validate(data)


async def handle_slack_request(body: bytes, headers, settings: Settings) -> JSONResponse:
    """Dispatch a Slack request based on its payload type.

    - url_verification: echo the challenge (no signature required)
    - event_callback: verify the signature, then process the contained event
    - anything else: acknowledge with 200
    """
    payload = parse_payload(body)
    if payload is None:
        return JSONResponse({"success": True})

    logger.info("Slack request received", extra={"payload_type": str(payload.type)})

    if payload.type == "url_verification":
        logger.info("URL verification request")
        return JSONResponse({"challenge": payload.challenge})

    if payload.type == "event_callback":
        if not verify_slack_request(settings.slack_signing_secret, headers, body):
            return JSONResponse({"error": "Unauthorized"}, status_code=401)

        event = message_event(payload.event)
        if event is not None:
            await handle_message_event(event, settings)
        return JSONResponse({"success": True})

    return JSONResponse({"success": True})


def message_event(raw) -> MessageEvent | None:
    """Return the inner event as a MessageEvent, or None for other event types.

    Message events whose fields have unexpected types are logged and ignored.
    """
    if not isinstance(raw, dict):
        logger.info("Ignoring non-object event", extra={"event_kind": type(raw).__name__})
        return None
    if raw.get("type") != "message":
        logger.info("Ignoring non-message event", extra={"event_type": str(raw.get("type"))})
        return None
    try:
        return MessageEvent.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Malformed message event ignored (%d validation errors)", exc.error_count())
        return None


def is_actionable(event: MessageEvent) -> bool:
    """Return True for human-authored, non-empty messages in public channels.

    Bot messages are skipped so the bridge never reacts to its own
    confirmations.
    """
    if event.type != "message":
        return False
    if event.bot_id:
        return False
    if not event.text:
        return False
    return bool(event.channel) and event.channel.startswith(PUBLIC_CHANNEL_PREFIX)


async def handle_message_event(event: MessageEvent, settings: Settings) -> None:
    """Trigger a pipeline for a test command and report the outcome in Slack.

    Trigger failures are reported to the channel; they never propagate.
    """
    logger.info("Event received", extra={"event_type": event.type})
    if not is_actionable(event):
        return

    config = parse_test_command(event.text)
    if config is None:
        logger.info("Not a test command, ignoring", extra={"slack_channel": event.channel})
        return

    user = event.user or ""
    logger.info(
        "Test command detected",
        extra={
            "slack_user": user,
            "slack_channel": event.channel,
            "test_suite": config.test_suite.value,
            "test_environment": config.environment.value,
            "ref": config.branch,
        },
    )

    try:
        pipeline = await trigger_pipeline(config, user, event.channel, settings)
    except CITriggerError as exc:
        logger.error("Failed to trigger tests: %s", exc)
        await notify_failed(event.channel, str(exc), settings)
        return

    await notify_triggered(event.channel, user, config, pipeline, settings)
