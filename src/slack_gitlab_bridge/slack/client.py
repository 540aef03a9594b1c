"""Async Slack client singleton.

Creates a cached AsyncWebClient for the bot token. The client attaches the
``Authorization: Bearer <token>`` header to every Web API call.
"""

from slack_sdk.web.async_client import AsyncWebClient

from slack_gitlab_bridge.config import Settings

_client: AsyncWebClient | None = None


async def get_slack_client(settings: Settings) -> AsyncWebClient:
    """Return a cached async Slack client instance.

    Creates the client on first call using slack_bot_token from settings.
    A different token (e.g. after settings are reloaded) replaces the cache.
    """
    global _client
    if _client is None or _client.token != settings.slack_bot_token:
        _client = AsyncWebClient(token=settings.slack_bot_token)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
