"""Classified failures of the remote agent call.

Errors coming out of the SDK are converted once, at the client boundary,
into one of three variants so callers never inspect raw exceptions.
"""

from __future__ import annotations

from typing import Optional


class AgentCallError(Exception):
    """Base class for classified agent call failures."""

    status: Optional[int] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def display_message(self) -> str:
        if self.status is not None:
            first_line = self.message.split("\n")[0] if self.message else ""
            return f"API Error {self.status}: {first_line or 'Unknown error'}"
        return self.message or self.__class__.__name__

    @property
    def retryable(self) -> bool:
        return False


class TransientServerError(AgentCallError):
    """Server-side (5xx) failure; worth retrying."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status

    @property
    def retryable(self) -> bool:
        return True


class ClientError(AgentCallError):
    """Request rejected with a non-5xx status."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class GenericError(AgentCallError):
    """Failure without a status code (network, malformed response, timeout)."""


def _status_of(exc: BaseException) -> Optional[int]:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def classify_error(exc: BaseException) -> AgentCallError:
    """Map any exception raised by a client SDK onto an AgentCallError."""

    if isinstance(exc, AgentCallError):
        return exc

    status = _status_of(exc)
    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc) if isinstance(exc, Exception) else repr(exc)

    if status is not None:
        if status >= 500:
            return TransientServerError(status, message)
        return ClientError(status, message)
    return GenericError(message)


__all__ = [
    "AgentCallError",
    "ClientError",
    "GenericError",
    "TransientServerError",
    "classify_error",
]
