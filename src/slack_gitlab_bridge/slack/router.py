"""Slack webhook router."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from slack_gitlab_bridge.config import Settings, get_settings
from slack_gitlab_bridge.slack.handlers import handle_slack_request

logger = logging.getLogger(__name__)

EVENTS_PATH = "/api/slack-event"

# Exception details go to the log only, never to the caller.
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while processing the request"

router = APIRouter(prefix="", tags=["slack"])


@router.post(EVENTS_PATH)
async def slack_events(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Receive Slack webhook events.

    The raw body is read before JSON parsing so signature verification
    sees the exact bytes Slack signed.
    """
    try:
        body = await request.body()
        return await handle_slack_request(body, request.headers, settings)
    except Exception:
        logger.exception("Unhandled error processing Slack request")
        return JSONResponse(
            {"error": "Internal server error", "message": INTERNAL_ERROR_MESSAGE},
            status_code=500,
        )


@router.get(EVENTS_PATH)
async def slack_events_status() -> dict:
    """Browser-friendly readiness check for the webhook URL."""
    return {
        "message": "Slack GitLab Bridge is working!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "ready",
    }


@router.api_route(
    EVENTS_PATH,
    methods=["HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def slack_events_method_not_allowed() -> JSONResponse:
    """Reject methods other than GET and POST."""
    return JSONResponse(
        {"error": "Method not allowed"},
        status_code=405,
        headers={"Allow": "GET, POST"},
    )
