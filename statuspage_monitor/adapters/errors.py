"""Project-native typed exceptions for outbound adapter failures."""

from __future__ import annotations

from statuspage_monitor.domain import ProbeOutcome


class StatusMonitorAdapterError(Exception):
    """Base exception for adapter-level failures."""


class ProbeRequestError(StatusMonitorAdapterError, ConnectionError):
    """Health probe failed with a non-success response or a transport error.

    Attributes:
        outcome: Response extracted from the failure, or None when no response was received.
    """

    def __init__(self, message: str, outcome: ProbeOutcome | None = None):
        super().__init__(message)
        self.outcome = outcome


class StatusPageUpdateError(StatusMonitorAdapterError, ConnectionError):
    """Statuspage.io rejected a component update or could not be reached.

    Attributes:
        status_code: Provider response status, when a response was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteInvocationError(StatusMonitorAdapterError, RuntimeError):
    """Remote status-update function could not be invoked."""
