"""Test command model and the enums for its suite and environment."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TestSuite(str, Enum):
    """Canonical test suites a pipeline can run."""

    __test__ = False  # keep pytest from collecting this class

    UNIT = "unit"
    INTEGRATION = "integration"
    E2E = "e2e"
    SECURITY = "security"
    PERFORMANCE = "performance"
    ALL = "all"


class TestEnvironment(str, Enum):
    """Canonical environments tests can target."""

    __test__ = False

    STAGING = "staging"
    PRODUCTION = "production"
    DEVELOPMENT = "development"


class TestConfig(BaseModel):
    """A parsed test command. Lives for a single request only."""

    model_config = ConfigDict(frozen=True)
    __test__ = False

    test_suite: TestSuite = TestSuite.ALL
    environment: TestEnvironment = TestEnvironment.STAGING
    branch: str = "main"
