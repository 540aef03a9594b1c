"""GitLab egress: pipeline triggers."""

from slack_gitlab_bridge.gitlab.errors import CITriggerError
from slack_gitlab_bridge.gitlab.trigger import trigger_pipeline

__all__ = ["CITriggerError", "trigger_pipeline"]
