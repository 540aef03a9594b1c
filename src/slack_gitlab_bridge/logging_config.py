"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON with GCP-compatible field names.
Hosting platforms that collect stdout (Cloud Run, Vercel) pick up `severity`,
`message`, and any `extra` fields passed to a log call.

Usage:
    from slack_gitlab_bridge.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "slack-gitlab-bridge",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        # Request-level noise from the HTTP clients
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    Unknown level names fall back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    config["root"]["level"] = level_name
    logging.config.dictConfig(config)
