"""Trigger pipeline runs."""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from azdo_commands.client import AzureDevOpsClient
from azdo_commands.errors import InvalidArgumentError, UpstreamRequestError
from azdo_commands.models.pipeline import PipelineRun, RunResponse

log = logging.getLogger(__name__)

RUNS_API_VERSION = "7.1-preview.1"
BRANCH_REF_PREFIX = "refs/heads/"


def runs_path(organization: str, project: str, pipeline_id: int) -> str:
    """Build the path of the pipeline runs endpoint."""
    return (
        f"/{quote(organization, safe='')}/{quote(project, safe='')}"
        f"/_apis/pipelines/{pipeline_id}/runs?api-version={RUNS_API_VERSION}"
    )


def branch_ref(branch: str) -> str:
    """Qualify a branch name as a full git ref."""
    if branch.startswith(BRANCH_REF_PREFIX):
        return branch
    return f"{BRANCH_REF_PREFIX}{branch}"


def build_run_payload(
    branch: str | None = None,
    template_parameters: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Build the request body for a new run.

    An empty object runs the pipeline's default branch with default
    parameters.
    """
    payload: dict[str, Any] = {}
    if branch:
        payload["resources"] = {
            "repositories": {"self": {"refName": branch_ref(branch)}}
        }
    if template_parameters:
        payload["templateParameters"] = dict(template_parameters)
    return payload


def parse_run(
    data: Any,
    *,
    organization: str,
    project: str,
    pipeline_id: int,
    branch: str | None,
) -> PipelineRun:
    """Combine request inputs with the run fields of a response."""
    response = RunResponse.model_validate(data)
    return PipelineRun(
        pipeline_id=pipeline_id,
        project=project,
        organization=organization,
        branch=branch,
        run_id=response.id,
        status=response.state,
        url=response.links.web.href,
    )


def validate_trigger_arguments(
    project: str, pipeline_id: int, branch: str | None
) -> None:
    """Reject arguments that cannot form a valid request.

    Raises:
        InvalidArgumentError: If project is blank, pipeline_id is not a
            positive integer, or branch is given but blank

    """
    if not project.strip():
        raise InvalidArgumentError("Project name must not be blank")
    if isinstance(pipeline_id, bool) or not isinstance(pipeline_id, int):
        raise InvalidArgumentError(
            f"Pipeline ID must be an integer, got {pipeline_id!r}"
        )
    if pipeline_id <= 0:
        raise InvalidArgumentError(f"Pipeline ID must be positive, got {pipeline_id}")
    if branch is not None and not branch.strip():
        raise InvalidArgumentError("Branch must not be blank")


async def trigger_pipeline(
    client: AzureDevOpsClient,
    project: str,
    pipeline_id: int,
    *,
    branch: str | None = None,
    template_parameters: Mapping[str, str] | None = None,
) -> PipelineRun:
    """Start a new run of a pipeline and return the acknowledgment.

    Args:
        client: Client scoped to the organization owning the project
        project: Project name or ID
        pipeline_id: Numeric pipeline definition ID
        branch: Branch to run, the pipeline default when None
        template_parameters: Runtime parameters for the pipeline template

    Returns:
        The run as acknowledged by Azure DevOps

    Raises:
        InvalidArgumentError: If an argument is malformed (no request is sent)
        UpstreamRequestError: If the API call fails

    """
    validate_trigger_arguments(project, pipeline_id, branch)

    path = runs_path(client.organization, project, pipeline_id)
    payload = build_run_payload(branch, template_parameters)
    data = await client.post(path, payload)

    try:
        run = parse_run(
            data,
            organization=client.organization,
            project=project,
            pipeline_id=pipeline_id,
            branch=branch,
        )
    except ValidationError as exc:
        raise UpstreamRequestError(
            method="POST",
            url=path,
            status=None,
            message=f"Unexpected response body: {exc}",
        ) from exc

    log.info(
        "Created run %s of pipeline %s in %s/%s",
        run.run_id,
        pipeline_id,
        client.organization,
        project,
    )
    return run
