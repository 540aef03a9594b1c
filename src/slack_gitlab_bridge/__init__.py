"""Slack to GitLab bridge: trigger CI test pipelines from Slack messages."""

__version__ = "0.1.0"
