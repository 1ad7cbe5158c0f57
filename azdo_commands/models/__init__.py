"""Records shaped from Azure DevOps API responses."""

from azdo_commands.models.pipeline import PipelineRun, RunLinks, RunResponse, WebLink
from azdo_commands.models.project import Project, ProjectList

__all__ = [
    "PipelineRun",
    "Project",
    "ProjectList",
    "RunLinks",
    "RunResponse",
    "WebLink",
]
