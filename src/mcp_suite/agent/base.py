"""Types shared by every agent client implementation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Sequence


@dataclass(frozen=True)
class ToolResult:
    """One tool execution reported by the agent run."""

    name: str
    result: str
    step: int
    error: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "ToolResult":
        """Build from an SDK object or mapping, stringifying the payload."""

        def _get(key: str, default: Any = None) -> Any:
            if isinstance(raw, dict):
                return raw.get(key, default)
            return getattr(raw, key, default)

        payload = _get("result")
        if not isinstance(payload, str):
            payload = json.dumps(payload, default=str)

        error = _get("error")
        return cls(
            name=str(_get("name", "")),
            result=payload,
            step=int(_get("step", 0) or 0),
            error=str(error) if error else None,
        )


@dataclass(frozen=True)
class AgentRunResult:
    """Normalised outcome of one agent turn."""

    tools_called: List[str] = field(default_factory=list)
    tool_results: List[ToolResult] = field(default_factory=list)
    final_output: Optional[str] = None


class AgentClient(Protocol):
    """Anything able to run a single agent turn against MCP servers."""

    async def run(
        self,
        *,
        input: str,
        model: str,
        mcp_servers: Sequence[str],
        max_steps: int,
        verbose: bool = False,
        debug: bool = False,
    ) -> AgentRunResult:
        ...
