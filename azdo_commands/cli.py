"""CLI entry point for Azure DevOps commands."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Mapping, Sequence

from azdo_commands.client import AzureDevOpsClient
from azdo_commands.commands import list_projects, trigger_pipeline
from azdo_commands.config import AzureDevOpsConfig, resolve_config
from azdo_commands.errors import (
    AzureDevOpsError,
    InvalidArgumentError,
    UpstreamRequestError,
)
from azdo_commands.models import PipelineRun, Project

EXIT_UPSTREAM_FAILURE = 1
EXIT_USAGE = 2


def exit_code_for(error: AzureDevOpsError) -> int:
    """Map an error to the process exit code."""
    if isinstance(error, UpstreamRequestError):
        return EXIT_UPSTREAM_FAILURE
    return EXIT_USAGE


def log_projects_summary(log: logging.Logger, projects: Sequence[Project]) -> None:
    """Log a formatted summary of listed projects."""
    log.info("Projects: %d", len(projects))
    for project in projects:
        log.info(
            "  %s (%s) state=%s visibility=%s",
            project.name,
            project.id,
            project.state,
            project.visibility,
        )


def log_run_summary(log: logging.Logger, run: PipelineRun) -> None:
    """Log a formatted summary of a triggered run."""
    log.info(
        "Run %s of pipeline %s in %s/%s: %s",
        run.run_id,
        run.pipeline_id,
        run.organization,
        run.project,
        run.status,
    )
    if run.branch:
        log.info("  Branch: %s", run.branch)
    if run.url:
        log.info("  Run URL: %s", run.url)


def parse_template_parameters(values: Sequence[str]) -> Mapping[str, str]:
    """Parse NAME=VALUE pairs into template parameters."""
    parameters: dict[str, str] = {}
    for value in values:
        name, sep, parameter_value = value.partition("=")
        if not sep or not name.strip():
            raise InvalidArgumentError(
                f"Template parameter must be NAME=VALUE, got {value!r}"
            )
        parameters[name.strip()] = parameter_value
    return parameters


async def run_list_projects(config: AzureDevOpsConfig) -> int:
    """List projects and return exit code."""
    log = logging.getLogger("azdo_commands")

    log.info("Listing projects in organization %s", config.organization)
    try:
        async with AzureDevOpsClient.from_config(config) as client:
            projects = await list_projects(client)
    except AzureDevOpsError as exc:
        log.error("%s", exc)
        return exit_code_for(exc)

    log_projects_summary(log, projects)
    print(json.dumps([project.to_dict() for project in projects], indent=2))
    return 0


async def run_trigger_pipeline(
    config: AzureDevOpsConfig,
    project: str,
    pipeline_id: int,
    branch: str | None = None,
    template_parameters: Mapping[str, str] | None = None,
) -> int:
    """Trigger a pipeline run and return exit code."""
    log = logging.getLogger("azdo_commands")

    log.info(
        "Triggering pipeline %s in %s/%s", pipeline_id, config.organization, project
    )
    try:
        async with AzureDevOpsClient.from_config(config) as client:
            run = await trigger_pipeline(
                client,
                project,
                pipeline_id,
                branch=branch,
                template_parameters=template_parameters,
            )
    except AzureDevOpsError as exc:
        log.error("%s", exc)
        return exit_code_for(exc)

    log_run_summary(log, run)
    print(json.dumps(run.to_dict(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--organization",
        help="Organization name (default: $ORGANIZATION)",
    )
    common.add_argument(
        "--pat",
        help="Personal access token (default: $PAT)",
    )
    common.add_argument(
        "--api-base-url",
        help="Azure DevOps API host (default: https://dev.azure.com)",
    )
    common.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )

    parser = argparse.ArgumentParser(
        prog="azdo", description="Run commands against the Azure DevOps REST API"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "list-projects",
        parents=[common],
        help="List projects in an organization",
    )

    trigger = subparsers.add_parser(
        "trigger-pipeline",
        parents=[common],
        help="Start a new run of a pipeline",
    )
    trigger.add_argument("--project", required=True, help="Project name or ID")
    trigger.add_argument(
        "--pipeline-id",
        type=int,
        required=True,
        help="Numeric pipeline ID",
    )
    trigger.add_argument(
        "--branch",
        help="Branch to run (default: the pipeline's default branch)",
    )
    trigger.add_argument(
        "--parameter",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Template parameter for the run (repeatable)",
    )

    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("azdo_commands")

    try:
        config = resolve_config(
            args.organization,
            args.pat,
            environ=os.environ,
            api_base_url=args.api_base_url,
            timeout=args.timeout,
        )
        template_parameters = (
            parse_template_parameters(args.parameter)
            if args.command == "trigger-pipeline"
            else {}
        )
    except AzureDevOpsError as exc:
        log.error("%s", exc)
        sys.exit(exit_code_for(exc))

    log.debug("Resolved configuration: %r", config)

    if args.command == "list-projects":
        exit_code = asyncio.run(run_list_projects(config))
    else:
        exit_code = asyncio.run(
            run_trigger_pipeline(
                config,
                project=args.project,
                pipeline_id=args.pipeline_id,
                branch=args.branch,
                template_parameters=template_parameters,
            )
        )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
