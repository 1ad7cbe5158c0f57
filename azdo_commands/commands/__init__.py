"""Azure DevOps command operations."""

from azdo_commands.commands.pipelines import trigger_pipeline
from azdo_commands.commands.projects import list_projects

__all__ = ["list_projects", "trigger_pipeline"]
