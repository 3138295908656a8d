"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr

from qualitymax_action.client import ClientConfig, QualityMaxClient

API_BASE_URL = "http://qualitymax.test/api"


@pytest.fixture
def config() -> ClientConfig:
    """Create test configuration."""
    return ClientConfig(
        api_key=SecretStr("qm_test-key"),
        api_base_url=API_BASE_URL,
        poll_interval=0.01,
    )


@pytest.fixture
async def client(
    config: ClientConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[QualityMaxClient, None]:
    """Create client with managed session."""
    async with QualityMaxClient.from_config(config) as impl:
        yield impl
