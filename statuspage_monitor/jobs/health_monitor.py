"""Job-layer health monitor: probe, classify and propagate to the status page."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from loguru import logger

from statuspage_monitor.adapters import (
    HttpProberPort,
    ProbeRequestError,
    RemoteInvocationError,
    RemoteInvocationResult,
    RemoteInvokerPort,
)
from statuspage_monitor.domain import HealthState, ProbeOutcome, ProbeRequest

from .interfaces import HealthMonitorPort

_HTTP_STATUS_HEALTH_STATES: Final[dict[int, HealthState]] = {
    200: HealthState.OPERATIONAL,
    400: HealthState.PARTIAL_OUTAGE,
    500: HealthState.MAJOR_OUTAGE,
}


def job_classify_http_status(http_status_code: int | None) -> HealthState:
    """Map a probe HTTP status code to a health state.

    Codes without an explicit entry resolve to DEGRADED_PERFORMANCE. The
    UNDER_MAINTENANCE state is never produced here.

    Args:
        http_status_code: Probe response status code.

    Returns:
        HealthState: Classified state.
    """

    return _HTTP_STATUS_HEALTH_STATES.get(http_status_code, HealthState.DEGRADED_PERFORMANCE)


@dataclass(frozen=True)
class HealthMonitorConfig:
    """Configuration values for the health monitor.

    Attributes:
        probe_defaults: Process-level probe request defaults.
        default_component_ids: Component ids published when a call does not pass any.
    """

    probe_defaults: ProbeRequest
    default_component_ids: str | Sequence[str] | None = None


class HealthMonitor(HealthMonitorPort):
    """Concrete pipeline that turns one probe result into a status-page update."""

    def __init__(
        self,
        prober: HttpProberPort,
        remote_invoker: RemoteInvokerPort,
        config: HealthMonitorConfig,
    ):
        """Initialize health monitor dependencies.

        Args:
            prober: Adapter issuing the health-check request.
            remote_invoker: Adapter invoking the remote status-update function.
            config: Monitor configuration.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        if prober is None:
            raise ValueError("prober must not be None")
        if remote_invoker is None:
            raise ValueError("remote_invoker must not be None")
        if config is None:
            raise ValueError("config must not be None")

        self._prober = prober
        self._remote_invoker = remote_invoker
        self._config = config

    def monitor_get_api_response(self, overrides: Mapping[str, Any] | None = None) -> ProbeOutcome | None:
        """Send the probe built from defaults merged with overrides.

        Args:
            overrides: Optional probe field overrides applied field by field.

        Returns:
            ProbeOutcome | None: Probe response, or None when the effective url is blank.

        Raises:
            ProbeRequestError: Raised when the probe fails.
            ValueError: Raised when overrides contain unknown fields.
        """

        effective_request = self._config.probe_defaults.merged_with(overrides)
        if not effective_request.url:
            return None
        return self._prober.prober_send(effective_request)

    def monitor_get_api_status(self, http_status_code: int | None) -> HealthState:
        """Classify a probe status code (see `job_classify_http_status`)."""
        return job_classify_http_status(http_status_code)

    def monitor_update_status_page(
        self,
        state: HealthState,
        component_ids: str | Sequence[str] | None = None,
    ) -> RemoteInvocationResult:
        """Invoke the remote status-update function for the given state.

        Args:
            state: State to publish.
            component_ids: Component ids, defaulting to the configured list.

        Returns:
            RemoteInvocationResult: Remote invocation result.

        Raises:
            RemoteInvocationError: Raised when the invocation fails.
        """

        resolved_component_ids = component_ids if component_ids is not None else self._config.default_component_ids
        if isinstance(resolved_component_ids, Sequence) and not isinstance(resolved_component_ids, str):
            resolved_component_ids = list(resolved_component_ids)

        payload = {
            "body": {
                "status": int(state),
                "componentIds": resolved_component_ids,
            }
        }
        return self._remote_invoker.invoker_invoke(payload)

    def monitor_update_status(self, overrides: Mapping[str, Any] | None = None) -> HealthState | None:
        """Probe, classify and propagate one health state.

        Probe failures are not raised: the response attached to the failure is
        classified like any other. When no response is available the call
        returns None and nothing is published.

        Args:
            overrides: Optional probe field overrides.

        Returns:
            HealthState | None: Classified state, or None when the probe produced no response.
        """

        try:
            outcome = self.monitor_get_api_response(overrides)
            if outcome is not None:
                logger.warning(f"Probe response received: status={outcome.status_code}")
        except ProbeRequestError as error:
            outcome = error.outcome
            logger.error(f"Probe request failed: {error}")

        if outcome is None:
            return None

        logger.warning(f"Classifying probe response: status={outcome.status_code} succeeded={outcome.succeeded}")
        state = self.monitor_get_api_status(outcome.status_code)

        try:
            invocation_result = self.monitor_update_status_page(state)
        except RemoteInvocationError as error:
            logger.error(f"Status page propagation failed for state={state.status_page_value}: {error}")
            return state

        if invocation_result is not None and getattr(invocation_result, "function_error", None):
            logger.error(
                f"Status page function reported error={invocation_result.function_error} "
                f"for state={state.status_page_value}"
            )
        else:
            logger.info(f"Status page propagation completed for state={state.status_page_value}")

        return state
