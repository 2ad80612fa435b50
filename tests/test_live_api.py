import os

import pytest

from mcp_suite.config.models import GlobalConfig, ServerConfig, TestCase
from mcp_suite.testing.runner import MCPTestRunner

LIVE_SERVER = os.getenv("MCP_SUITE_LIVE_SERVER", "windsor/brave-search-mcp")


@pytest.mark.asyncio
@pytest.mark.slow
@pytest.mark.integration
@pytest.mark.skipif(not os.getenv("DEDALUS_API_KEY"), reason="DEDALUS_API_KEY not set")
async def test_live_server_answers_prompt() -> None:
    """Send one real prompt through the Dedalus API."""

    test = TestCase(name="live-search", input="Search the web for the Python language homepage URL.")
    server = ServerConfig(id="live", name="Live server", mcp_server=LIVE_SERVER, tests=[test])

    runner = MCPTestRunner(GlobalConfig(default_timeout=120000))
    results = await runner.run_server_tests(server)

    assert results.total_tests == 1
    assert results.passed == 1, f"Live test failed: {results.results[0].error}"
