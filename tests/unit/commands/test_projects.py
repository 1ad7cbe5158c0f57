"""Tests for project listing helpers."""

import pytest
from pydantic import ValidationError

from azdo_commands.commands.projects import parse_projects, projects_path
from azdo_commands.testing.payloads import project, projects_response


def test_projects_path() -> None:
    """Targets the projects endpoint with its API version."""
    assert (
        projects_path("test-org")
        == "/test-org/_apis/projects?api-version=7.1-preview.4"
    )


def test_projects_path_encodes_organization() -> None:
    """Organization is percent-encoded as a single path segment."""
    assert projects_path("my org").startswith("/my%20org/_apis/")


@pytest.mark.parametrize("count", [1, 2, 5])
def test_parse_projects_returns_one_record_per_element(count: int) -> None:
    """Returns exactly N projects in the same order."""
    payloads = [project(project_id=str(i), name=f"project-{i}") for i in range(count)]

    projects = parse_projects(projects_response(payloads))

    assert len(projects) == count
    assert [p.name for p in projects] == [p["name"] for p in payloads]
    assert [p.id for p in projects] == [p["id"] for p in payloads]


def test_parse_projects_empty_value() -> None:
    """Empty value array yields an empty sequence."""
    assert list(parse_projects({"count": 0, "value": []})) == []


def test_parse_projects_accepts_bare_array() -> None:
    """A bare array of projects is accepted."""
    projects = parse_projects([project(name="a"), project(name="b")])

    assert [p.name for p in projects] == ["a", "b"]


@pytest.mark.parametrize("data", [None, "not json object", 42])
def test_parse_projects_rejects_unexpected_shape(data: object) -> None:
    """Bodies that are neither an envelope nor an array fail validation."""
    with pytest.raises(ValidationError):
        parse_projects(data)
