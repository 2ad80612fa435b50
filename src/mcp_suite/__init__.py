"""End-to-end test suite for MCP servers reached through the Dedalus agent API."""

__version__ = "0.1.0"

__all__ = [
    "agent",
    "cli",
    "config",
    "testing",
]
