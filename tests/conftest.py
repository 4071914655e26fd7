"""
Root pytest configuration file for MCP ClickUp tests.
"""

import pytest


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"
