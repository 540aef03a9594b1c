"""Data models for Slack payloads, test commands, and GitLab pipelines."""

from slack_gitlab_bridge.models.command import TestConfig, TestEnvironment, TestSuite
from slack_gitlab_bridge.models.gitlab import PipelineResult
from slack_gitlab_bridge.models.slack import MessageEvent, SlackPayload

__all__ = [
    "MessageEvent",
    "SlackPayload",
    "TestConfig",
    "TestEnvironment",
    "TestSuite",
    "PipelineResult",
]
