"""Free-text test command parsing.

Turns a Slack message such as "run tests integration on prod branch release"
into a TestConfig. Matching is plain substring search over the lower-cased
text, so keyword order in the tables below decides ties: the first key found
in the text wins, regardless of where it appears in the message.
"""

import re

from slack_gitlab_bridge.models.command import TestConfig, TestEnvironment, TestSuite

TEST_TRIGGERS = ("test", "run test", "run tests", "execute test")

# Iteration order is significant: "unit" beats "e2e" when both appear.
TEST_SUITES: dict[str, TestSuite] = {
    "unit": TestSuite.UNIT,
    "integration": TestSuite.INTEGRATION,
    "e2e": TestSuite.E2E,
    "end-to-end": TestSuite.E2E,
    "security": TestSuite.SECURITY,
    "performance": TestSuite.PERFORMANCE,
    "perf": TestSuite.PERFORMANCE,
    "all": TestSuite.ALL,
    "full": TestSuite.ALL,
}

TEST_ENVIRONMENTS: dict[str, TestEnvironment] = {
    "staging": TestEnvironment.STAGING,
    "prod": TestEnvironment.PRODUCTION,
    "production": TestEnvironment.PRODUCTION,
    "dev": TestEnvironment.DEVELOPMENT,
    "development": TestEnvironment.DEVELOPMENT,
}

# An explicit "branch <name>" wins over "on <name>". \w stops at hyphens and
# slashes: "on feature-123" yields "feature".
BRANCH_PATTERNS = (
    re.compile(r"\bbranch\s+(\w+)", re.ASCII),
    re.compile(r"\bon\s+(\w+)", re.ASCII),
)

DEFAULT_BRANCH = "main"


def is_test_command(text: str) -> bool:
    """Return True if the text contains any of the trigger phrases."""
    normalized = text.lower().strip()
    return any(trigger in normalized for trigger in TEST_TRIGGERS)


def _first_match(text: str, table: dict, default):
    for keyword, value in table.items():
        if keyword in text:
            return value
    return default


def extract_branch(text: str) -> str | None:
    """Return the branch named after the word "branch" or "on", if any."""
    normalized = text.lower()
    for pattern in BRANCH_PATTERNS:
        match = pattern.search(normalized)
        if match:
            return match.group(1)
    return None


def parse_test_command(text: str | None) -> TestConfig | None:
    """Parse a chat message into a TestConfig.

    Returns None when the message is not a test command. Otherwise every
    dimension not mentioned in the text falls back to its default
    (suite "all", environment "staging", branch "main").
    """
    if not text:
        return None

    normalized = text.lower().strip()
    if not is_test_command(normalized):
        return None

    return TestConfig(
        test_suite=_first_match(normalized, TEST_SUITES, TestSuite.ALL),
        environment=_first_match(normalized, TEST_ENVIRONMENTS, TestEnvironment.STAGING),
        branch=extract_branch(normalized) or DEFAULT_BRANCH,
    )
