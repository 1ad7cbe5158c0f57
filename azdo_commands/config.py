"""Configuration for Azure DevOps commands."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

from azdo_commands.errors import InvalidArgumentError, MissingCredentialError

ORGANIZATION_ENV = "ORGANIZATION"
TOKEN_ENV = "PAT"

DEFAULT_API_BASE_URL = "https://dev.azure.com"
DEFAULT_TIMEOUT = 30.0


class AzureDevOpsConfig(BaseModel):
    """Resolved configuration for a single command invocation."""

    model_config = ConfigDict(frozen=True)

    organization: str
    token: SecretStr
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("api_base_url")
    @classmethod
    def host_root_only(cls, value: str) -> str:
        """Request paths are absolute, so the base URL must be a bare host."""
        parts = urlsplit(value)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"api_base_url must be an http(s) URL, got {value!r}")
        if parts.path not in {"", "/"} or parts.query or parts.fragment:
            raise ValueError(
                f"api_base_url must not have a path, query or fragment, got {value!r}"
            )
        return f"{parts.scheme}://{parts.netloc}"


def _pick(explicit: str | None, environ: Mapping[str, str], key: str) -> str:
    value = explicit if explicit is not None else environ.get(key, "")
    return value.strip()


def resolve_config(
    organization: str | None = None,
    token: str | None = None,
    *,
    environ: Mapping[str, str],
    api_base_url: str | None = None,
    timeout: float | None = None,
) -> AzureDevOpsConfig:
    """Merge explicit arguments with environment defaults.

    Args:
        organization: Organization name, falls back to ``ORGANIZATION``
        token: Personal access token, falls back to ``PAT``
        environ: Environment mapping captured at process start
        api_base_url: Override for the API host (default: dev.azure.com)
        timeout: Total request timeout in seconds

    Returns:
        Fully resolved configuration

    Raises:
        MissingCredentialError: If organization or token is absent or blank
        InvalidArgumentError: If the timeout is not positive

    """
    resolved_organization = _pick(organization, environ, ORGANIZATION_ENV)
    resolved_token = _pick(token, environ, TOKEN_ENV)

    missing: list[str] = []
    hints: list[str] = []
    if not resolved_organization:
        missing.append("organization")
        hints.append(f"pass --organization or set {ORGANIZATION_ENV}")
    if not resolved_token:
        missing.append("token")
        hints.append(f"pass --pat or set {TOKEN_ENV}")
    if missing:
        raise MissingCredentialError(missing, hints)

    overrides: dict[str, Any] = {}
    if api_base_url is not None:
        overrides["api_base_url"] = api_base_url
    if timeout is not None:
        overrides["timeout"] = timeout

    try:
        return AzureDevOpsConfig(
            organization=resolved_organization,
            token=SecretStr(resolved_token),
            **overrides,
        )
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid configuration: {exc}") from exc
