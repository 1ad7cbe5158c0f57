"""Models for the Azure DevOps pipeline runs API."""

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import Field

from azdo_commands.models.base import ResponseModel


class WebLink(ResponseModel):
    """Web link in _links."""

    href: str = ""


class RunLinks(ResponseModel):
    """Links in pipeline run response."""

    web: WebLink = Field(default_factory=WebLink)


class RunResponse(ResponseModel):
    """Body returned by POST /_apis/pipelines/{id}/runs."""

    id: int = 0
    name: str = ""
    state: str = ""
    result: str = ""
    links: RunLinks = Field(default_factory=RunLinks, alias="_links")


@dataclass(frozen=True, kw_only=True)
class PipelineRun:
    """Acknowledgment of a triggered pipeline run.

    Combines the request inputs with the run identity assigned by Azure
    DevOps. It is a point-in-time record, not a live handle on the run.
    """

    pipeline_id: int
    project: str
    organization: str
    branch: str | None
    run_id: int
    status: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-compatible dict."""
        return asdict(self)
