"""Typed interfaces for adapter-layer responsibilities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from typing import Protocol

import httpx

from statuspage_monitor.domain import ComponentUpdateResult, HealthState, ProbeOutcome, ProbeRequest


@dataclass(frozen=True)
class RemoteInvocationResult:
    """Result contract for remote function invocations.

    Attributes:
        status_code: Invocation status code reported by the platform.
        payload: Decoded response payload, when the function returned one.
        function_error: Function error marker reported by the platform.
    """

    status_code: int
    payload: Any = None
    function_error: str | None = None


class HttpProberPort(Protocol):
    """Port definition for issuing the health-check request."""

    def prober_send(self, request: ProbeRequest) -> ProbeOutcome:
        """Send one probe request.

        Args:
            request: Effective probe request.

        Returns:
            ProbeOutcome: Successful response view.

        Raises:
            ProbeRequestError: Raised for non-success responses and transport failures.
        """


class StatusPageClientPort(Protocol):
    """Port definition for updating Statuspage.io components."""

    def client_update_component_status(
        self,
        component_id: str | None,
        status: HealthState | str | None,
        page_id: str | None = None,
    ) -> httpx.Response | None:
        """Update one component.

        Args:
            component_id: Component id.
            status: Target state.
            page_id: Optional page id override.

        Returns:
            httpx.Response | None: Provider response, or None when inputs were missing.

        Raises:
            StatusPageUpdateError: Raised when the provider rejects the update.
        """

    def client_update_components_status(
        self,
        component_ids: str | Sequence[str] | None,
        status: HealthState | str | None,
        page_id: str | None = None,
    ) -> list[ComponentUpdateResult]:
        """Update several components independently.

        Args:
            component_ids: Comma separated ids or a sequence of ids.
            status: Target state.
            page_id: Optional page id override.

        Returns:
            list[ComponentUpdateResult]: Per-component outcomes in input order.
        """


class RemoteInvokerPort(Protocol):
    """Port definition for invoking the remote status-update function."""

    def invoker_invoke(self, payload: dict[str, Any]) -> RemoteInvocationResult:
        """Invoke the configured remote function with a JSON payload.

        Args:
            payload: JSON-serializable payload.

        Returns:
            RemoteInvocationResult: Invocation result.

        Raises:
            RemoteInvocationError: Raised when the invocation cannot be performed.
        """
