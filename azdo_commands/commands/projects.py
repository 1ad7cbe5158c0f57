"""List the projects of an organization."""

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from azdo_commands.client import AzureDevOpsClient
from azdo_commands.errors import UpstreamRequestError
from azdo_commands.models.project import Project, ProjectList

log = logging.getLogger(__name__)

PROJECTS_API_VERSION = "7.1-preview.4"


def projects_path(organization: str) -> str:
    """Build the path of the projects endpoint."""
    return (
        f"/{quote(organization, safe='')}"
        f"/_apis/projects?api-version={PROJECTS_API_VERSION}"
    )


def parse_projects(data: Any) -> Sequence[Project]:
    """Shape a decoded response into projects, preserving order.

    Accepts the ``{"count": ..., "value": [...]}`` envelope or a bare array.
    """
    if isinstance(data, list):
        return [Project.model_validate(item) for item in data]
    return list(ProjectList.model_validate(data).value)


async def list_projects(client: AzureDevOpsClient) -> Sequence[Project]:
    """List all projects visible to the token in the client's organization."""
    path = projects_path(client.organization)
    data = await client.get(path)

    try:
        projects = parse_projects(data)
    except ValidationError as exc:
        raise UpstreamRequestError(
            method="GET",
            url=path,
            status=None,
            message=f"Unexpected response body: {exc}",
        ) from exc

    log.info(
        "Found %d project(s) in organization %s", len(projects), client.organization
    )
    return projects
