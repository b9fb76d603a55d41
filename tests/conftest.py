"""
Pytest configuration and fixtures for tubelist tests.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from tests.factories.youtube_response_factory import TEST_ENDPOINT
from tubelist.config.settings import Settings
from tubelist.container import container
from tubelist.services.interfaces import HttpGatewayInterface


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with a test API key and endpoint."""
    return Settings(
        youtube_api_key="test_api_key",
        youtube_api_endpoint=TEST_ENDPOINT + "/",
        log_level="INFO",
        debug=False,
    )


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """Gateway stub; set ``mock_gateway.get.return_value`` per test."""
    return AsyncMock(spec=HttpGatewayInterface)


@pytest.fixture
def wired_container(mock_settings: Settings, mock_gateway: AsyncMock):
    """Global container wired to the test settings and gateway stub."""
    container.reset()
    container.override_settings(mock_settings)
    container.override_gateway(mock_gateway)
    yield container
    container.reset()
