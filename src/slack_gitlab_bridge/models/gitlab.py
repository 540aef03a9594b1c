"""Result type for GitLab pipeline triggers."""

from pydantic import BaseModel, ConfigDict


class PipelineResult(BaseModel):
    """Pipeline created by the trigger API.

    GitLab returns the full pipeline object; fields beyond the ones used in
    Slack confirmations are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    web_url: str
    status: str | None = None
    ref: str | None = None
