"""Status-update job executed by the remote status-page function."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from statuspage_monitor.adapters import StatusPageClientPort
from statuspage_monitor.domain import ComponentUpdateResult, HealthState


@dataclass(frozen=True)
class StatusUpdateSummary:
    """Result contract for one status-update event.

    Attributes:
        state: Published state.
        results: Per-component outcomes in input order.
    """

    state: HealthState
    results: list[ComponentUpdateResult] = field(default_factory=list)

    @property
    def failed_component_ids(self) -> list[str]:
        return [result.component_id for result in self.results if not result.succeeded]

    def summary_as_payload(self) -> dict[str, Any]:
        """Return a JSON-serializable summary payload."""
        return {
            "status": int(self.state),
            "statusValue": self.state.status_page_value,
            "components": [
                {
                    "componentId": result.component_id,
                    "pageId": result.target.page_id,
                    "statusCode": result.status_code,
                    "error": result.error,
                }
                for result in self.results
            ],
        }


def job_extract_status_update_body(event: Mapping[str, Any] | None) -> dict[str, Any]:
    """Extract the `{status, componentIds}` body from an invocation event.

    The body may be a mapping or a JSON-encoded string.

    Args:
        event: Invocation event.

    Returns:
        dict[str, Any]: Decoded body mapping.

    Raises:
        ValueError: Raised when the event carries no decodable body.
    """

    if not isinstance(event, Mapping):
        raise ValueError("status update event must be a mapping")

    raw_body = event.get("body")
    if isinstance(raw_body, (bytes, bytearray)):
        raw_body = bytes(raw_body).decode("utf-8")
    if isinstance(raw_body, str):
        try:
            raw_body = json.loads(raw_body)
        except json.JSONDecodeError as error:
            raise ValueError("status update body must be valid JSON") from error
    if not isinstance(raw_body, Mapping):
        raise ValueError("status update event must carry a body mapping")
    return dict(raw_body)


def job_handle_status_update_event(
    event: Mapping[str, Any] | None,
    status_page_client: StatusPageClientPort,
    default_component_ids: str | Sequence[str] | None = None,
    page_id: str | None = None,
) -> StatusUpdateSummary:
    """Publish the state carried by one status-update event.

    Args:
        event: Invocation event `{"body": {"status": <1-5>, "componentIds": ..., "pageId": ...}}`.
        status_page_client: Statuspage.io adapter.
        default_component_ids: Component ids used when the body carries none.
        page_id: Optional page id override; the body `pageId` is used when omitted.

    Returns:
        StatusUpdateSummary: Published state and per-component outcomes.

    Raises:
        ValueError: Raised when the event or its status is invalid.
    """

    body = job_extract_status_update_body(event)
    if body.get("status") is None:
        raise ValueError("status update body must carry a status")

    state = HealthState.from_value(body["status"])
    component_ids = body.get("componentIds") or default_component_ids

    results = status_page_client.client_update_components_status(component_ids, state, page_id or body.get("pageId"))
    summary = StatusUpdateSummary(state=state, results=results)

    if summary.failed_component_ids:
        logger.error(
            f"Status update {state.status_page_value} failed for components={','.join(summary.failed_component_ids)}"
        )
    else:
        logger.info(f"Status update {state.status_page_value} applied to {len(results)} component(s)")

    return summary
