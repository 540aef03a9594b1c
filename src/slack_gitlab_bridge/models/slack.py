"""Slack Events API payload models.

Only the fields the bridge reads are declared; Slack sends many more
(team_id, event_id, ts, blocks, ...), which are kept as extras.

The envelope leaves ``event`` as raw JSON. Slack delivers every subscribed
event type through the same endpoint, and non-message events carry objects
where a message carries strings (``channel_created`` has a channel object,
``team_join`` a user object). Only message events are turned into a
MessageEvent.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MessageEvent(BaseModel):
    """A ``message`` event from an event_callback payload."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    user: str | None = None
    channel: str | None = None
    text: str | None = None
    bot_id: str | None = None


class SlackPayload(BaseModel):
    """Top-level body of a Slack Events API request."""

    model_config = ConfigDict(extra="allow")

    type: Any = None
    challenge: Any = None
    event: Any = None
