"""Gateway error taxonomy."""
from typing import Optional


class GatewayError(Exception):
    """Base class for failures talking to the command service."""


class TransportError(GatewayError):
    """Network failure, unparseable body or non-2xx without a usable body."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class ApplicationError(GatewayError):
    """The service understood the request but rejected it (success: false)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PlanSyncError(TransportError):
    """The best-effort plan re-fetch failed; logged, never shown in the chat."""


__all__ = ['GatewayError', 'TransportError', 'ApplicationError', 'PlanSyncError']
