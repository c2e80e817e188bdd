"""Shared pytest configuration."""

import pytest


@pytest.fixture
def anyio_backend():
    """Run ``@pytest.mark.anyio`` tests on asyncio, the loop FastMCP's client uses."""
    return "asyncio"
