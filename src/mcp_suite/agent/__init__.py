"""Boundary to the remote agent API.

``client`` pulls in the Dedalus SDK, so it is imported on demand rather
than from this package namespace.
"""

from .base import AgentClient, AgentRunResult, ToolResult  # noqa: F401
from .errors import (  # noqa: F401
    AgentCallError,
    ClientError,
    GenericError,
    TransientServerError,
    classify_error,
)

__all__ = [
    "AgentCallError",
    "AgentClient",
    "AgentRunResult",
    "ClientError",
    "GenericError",
    "ToolResult",
    "TransientServerError",
    "classify_error",
]
