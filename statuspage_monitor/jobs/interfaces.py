"""Typed interfaces for job-layer orchestration responsibilities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from statuspage_monitor.domain import HealthState


class HealthMonitorPort(Protocol):
    """Port definition for running the probe, classify and propagate pipeline."""

    def monitor_update_status(self, overrides: Mapping[str, Any] | None = None) -> HealthState | None:
        """Run one health check and propagate the classified state.

        Args:
            overrides: Optional probe field overrides.

        Returns:
            HealthState | None: Classified state, or None when the probe produced no response.
        """

    def monitor_update_status_page(
        self,
        state: HealthState,
        component_ids: str | Sequence[str] | None = None,
    ) -> Any:
        """Propagate one state to the status page.

        Args:
            state: State to publish.
            component_ids: Optional component ids override.

        Returns:
            Any: Remote invocation result.
        """
