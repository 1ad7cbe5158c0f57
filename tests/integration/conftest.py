"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr

from azdo_commands.client import AzureDevOpsClient
from azdo_commands.config import AzureDevOpsConfig
from azdo_commands.testing.payloads import API_BASE_URL


@pytest.fixture
def config() -> AzureDevOpsConfig:
    """Create test configuration."""
    return AzureDevOpsConfig(
        organization="test-org",
        token=SecretStr("test-pat-token"),
        api_base_url=API_BASE_URL,
    )


@pytest.fixture
async def client(
    config: AzureDevOpsConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[AzureDevOpsClient, None]:
    """Create client with managed session."""
    async with AzureDevOpsClient.from_config(config) as impl:
        yield impl
