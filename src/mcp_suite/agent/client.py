from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from dedalus_labs import AsyncDedalus, DedalusRunner

from ..config.settings import Settings, get_settings
from .base import AgentRunResult, ToolResult
from .errors import classify_error

logger = logging.getLogger(__name__)


def _field(raw: Any, key: str, default: Any = None) -> Any:
    if isinstance(raw, dict):
        return raw.get(key, default)
    return getattr(raw, key, default)


def normalize_run_result(raw: Any) -> AgentRunResult:
    """Convert whatever the SDK runner returned into an AgentRunResult."""

    tools_called: List[str] = [str(name) for name in (_field(raw, "tools_called") or [])]
    tool_results = [ToolResult.from_raw(tr) for tr in (_field(raw, "tool_results") or [])]

    final_output = _field(raw, "final_output")
    if final_output is not None and not isinstance(final_output, str):
        final_output = str(final_output)

    return AgentRunResult(
        tools_called=tools_called,
        tool_results=tool_results,
        final_output=final_output,
    )


class DedalusAgentClient:
    """AgentClient backed by the Dedalus SDK runner."""

    def __init__(self, api_key: Optional[str] = None, verbose: bool = False):
        self.client = AsyncDedalus(api_key=api_key) if api_key else AsyncDedalus()
        self.runner = DedalusRunner(self.client, verbose=verbose)

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
        try:
            raw = await self.runner.run(
                input=input,
                model=model,
                mcp_servers=list(mcp_servers),
                max_steps=max_steps,
                verbose=verbose,
                debug=debug,
            )
        except Exception as exc:
            raise classify_error(exc) from exc

        try:
            return normalize_run_result(raw)
        except (TypeError, ValueError) as exc:
            raise classify_error(exc) from exc


def get_agent_client(settings: Optional[Settings] = None, verbose: bool = False) -> DedalusAgentClient:
    cfg = settings or get_settings()
    logger.debug("Creating Dedalus agent client (verbose=%s)", verbose)
    return DedalusAgentClient(api_key=cfg.dedalus_api_key, verbose=verbose)
