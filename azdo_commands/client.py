"""Authenticated HTTP client for the Azure DevOps REST API."""

import base64
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from azdo_commands.config import AzureDevOpsConfig
from azdo_commands.errors import UpstreamRequestError

log = logging.getLogger(__name__)


def basic_auth_header(token: str) -> str:
    """Build the Authorization header value for a personal access token."""
    # Azure DevOps uses Basic Auth with empty username and PAT as password
    auth_bytes = base64.b64encode(f":{token}".encode()).decode("ascii")
    return f"Basic {auth_bytes}"


@dataclass(frozen=True, kw_only=True)
class AzureDevOpsClient:
    """Issues single authenticated requests against one organization."""

    config: AzureDevOpsConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: AzureDevOpsConfig
    ) -> AsyncGenerator["AzureDevOpsClient", None]:
        """Create client with managed session lifecycle."""
        headers = {
            "Authorization": basic_auth_header(config.token.get_secret_value()),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=config.timeout),
        ) as session:
            yield cls(config=config, session=session)

    @property
    def organization(self) -> str:
        """Organization every request is scoped to."""
        return self.config.organization

    async def request(
        self, method: str, path: str, *, payload: Any | None = None
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path and query relative to the API base URL
            payload: JSON body, omitted when None

        Returns:
            Decoded JSON body of a 2xx response

        Raises:
            UpstreamRequestError: On a non-2xx status, transport failure,
                timeout, or a body that is not valid JSON

        """
        log.debug("%s %s", method, path)
        try:
            async with self.session.request(method, path, json=payload) as response:
                if not 200 <= response.status < 300:
                    text = await response.text(errors="replace")
                    raise UpstreamRequestError(
                        method=method, url=path, status=response.status, message=text
                    )
                return await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError, ValueError) as exc:
            raise UpstreamRequestError(
                method=method,
                url=path,
                status=None,
                message=str(exc) or type(exc).__name__,
            ) from exc

    async def get(self, path: str) -> Any:
        """Send a GET request."""
        return await self.request("GET", path)

    async def post(self, path: str, payload: Any) -> Any:
        """Send a POST request with a JSON body."""
        return await self.request("POST", path, payload=payload)
