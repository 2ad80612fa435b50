import sys
from pathlib import Path
from typing import Any, List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mcp_suite.agent.base import AgentRunResult
from mcp_suite.config.models import GlobalConfig, ServerConfig, TestCase


class FakeStatusError(Exception):
    """Mimics an SDK error carrying an HTTP status."""

    def __init__(self, status_code: int, message: str = "Internal Server Error"):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class FakeAgentClient:
    """Deterministic stand-in for the remote agent.

    ``outcomes`` is consumed one entry per call; exceptions are raised,
    anything else is returned. The last entry repeats once exhausted.
    """

    def __init__(self, *outcomes: Any):
        self.outcomes: List[Any] = list(outcomes) or [AgentRunResult(final_output="ok")]
        self.calls: List[dict] = []

    async def run(self, *, input: str, model: str, mcp_servers: Sequence[str],
                  max_steps: int, verbose: bool = False, debug: bool = False) -> AgentRunResult:
        self.calls.append({
            "input": input,
            "model": model,
            "mcp_servers": list(mcp_servers),
            "max_steps": max_steps,
            "verbose": verbose,
            "debug": debug,
        })
        index = min(len(self.calls) - 1, len(self.outcomes) - 1)
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class NullReporter:
    """Reporter that records calls instead of printing."""

    def __init__(self):
        self.events: List[tuple] = []

    def __getattr__(self, name):
        if not name.startswith("print_"):
            raise AttributeError(name)

        def _record(*args):
            self.events.append((name, *args))

        return _record


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def reporter() -> NullReporter:
    return NullReporter()


@pytest.fixture
def global_config() -> GlobalConfig:
    return GlobalConfig(model="openai/gpt-4o-mini", max_steps=3, default_timeout=5000)


@pytest.fixture
def make_test():
    def _make(name: str = "search-test", **kwargs) -> TestCase:
        kwargs.setdefault("input", "Search for MCP servers")
        return TestCase(name=name, **kwargs)

    return _make


@pytest.fixture
def make_server(make_test):
    def _make(server_id: str = "brave", tests=None, **kwargs) -> ServerConfig:
        kwargs.setdefault("name", server_id.title())
        kwargs.setdefault("mcp_server", f"windsor/{server_id}-mcp")
        if tests is None:
            tests = [make_test()]
        return ServerConfig(id=server_id, tests=tests, **kwargs)

    return _make
