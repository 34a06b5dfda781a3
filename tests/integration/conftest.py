"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_THEONEAPI_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_THEONEAPI_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_THEONEAPI_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def api_token():
    token = os.environ.get("THE_ONE_API_TOKEN")
    if not token:
        pytest.skip("THE_ONE_API_TOKEN not set")
    return token
