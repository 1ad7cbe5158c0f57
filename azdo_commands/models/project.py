"""Models for the Azure DevOps projects API."""

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from azdo_commands.models.base import ResponseModel


class Project(ResponseModel):
    """A team project in an organization."""

    name: str = ""
    id: str = ""
    description: str = ""
    url: str = ""
    state: str = ""
    revision: int = 0
    visibility: str = ""
    last_update_time: str = Field(default="", alias="lastUpdateTime")

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-compatible dict."""
        return self.model_dump(mode="json")


class ProjectList(ResponseModel):
    """Envelope returned by GET /_apis/projects."""

    count: int = 0
    value: Sequence[Project] = Field(default_factory=tuple)
