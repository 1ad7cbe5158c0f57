"""Thin command wrappers around the Azure DevOps REST API."""

from azdo_commands.client import AzureDevOpsClient
from azdo_commands.commands import list_projects, trigger_pipeline
from azdo_commands.config import AzureDevOpsConfig, resolve_config
from azdo_commands.errors import (
    AzureDevOpsError,
    InvalidArgumentError,
    MissingCredentialError,
    UpstreamRequestError,
)
from azdo_commands.models import PipelineRun, Project

__all__ = [
    "AzureDevOpsClient",
    "AzureDevOpsConfig",
    "AzureDevOpsError",
    "InvalidArgumentError",
    "MissingCredentialError",
    "PipelineRun",
    "Project",
    "UpstreamRequestError",
    "list_projects",
    "resolve_config",
    "trigger_pipeline",
]
