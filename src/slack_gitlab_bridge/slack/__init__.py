"""Slack ingress: webhook handling, signature verification, and notifications."""

from slack_gitlab_bridge.slack.client import get_slack_client, reset_client
from slack_gitlab_bridge.slack.notifier import notify_failed, notify_triggered, send_message
from slack_gitlab_bridge.slack.router import router

__all__ = [
    "get_slack_client",
    "notify_failed",
    "notify_triggered",
    "reset_client",
    "router",
    "send_message",
]
