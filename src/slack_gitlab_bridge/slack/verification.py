"""Slack request signature verification.

Slack signs every request with ``X-Slack-Signature: v0=<hex>``, the HMAC-SHA256
of ``"v0:{timestamp}:{body}"`` keyed with the app's signing secret.
The timestamp is only checked as part of the signed string; there is no
staleness window.
"""

import hmac
import logging

from slack_sdk.signature import SignatureVerifier

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"


def verify_signature(
    secret: str, timestamp: str | None, signature: str | None, body: bytes | str
) -> bool:
    """Check a Slack signature against the raw request body.

    Returns False for missing headers, a missing secret, or a signature
    that does not match. Never raises.
    """
    if not secret or not timestamp or not signature:
        return False

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return False

    verifier = SignatureVerifier(signing_secret=secret)
    expected = verifier.generate_signature(timestamp=timestamp, body=body)
    if expected is None:
        return False
    return hmac.compare_digest(expected, signature)


def verify_slack_request(secret: str, headers, body: bytes) -> bool:
    """Verify an inbound request using its Slack signature headers."""
    timestamp = headers.get(TIMESTAMP_HEADER)
    signature = headers.get(SIGNATURE_HEADER)
    valid = verify_signature(secret, timestamp, signature, body)
    if not valid:
        logger.warning(
            "Slack signature verification failed",
            extra={
                "has_timestamp": bool(timestamp),
                "has_signature": bool(signature),
                "has_secret": bool(secret),
            },
        )
    return valid
