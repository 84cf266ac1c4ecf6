"""Status API router for pipeline triggers and manual component updates."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from statuspage_monitor.adapters import StatusPageClientPort
from statuspage_monitor.config import AppSettings
from statuspage_monitor.jobs import HealthMonitorPort, job_handle_status_update_event


def api_create_status_router(
    settings: AppSettings,
    health_monitor: HealthMonitorPort,
    status_page_client: StatusPageClientPort,
) -> APIRouter:
    """Create status router with check trigger and component update endpoints.

    Args:
        settings: Runtime settings used for default component ids.
        health_monitor: Pipeline triggered by `/status/check`.
        status_page_client: Statuspage.io adapter used by `/status/components`.

    Returns:
        APIRouter: Router exposing status APIs.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if health_monitor is None:
        raise ValueError("health_monitor must not be None")
    if status_page_client is None:
        raise ValueError("status_page_client must not be None")

    router = APIRouter(prefix="/status", tags=["status"])

    @router.post("/check")
    def api_status_check_trigger(overrides: dict[str, Any] | None = Body(default=None)) -> JSONResponse:
        """Run one probe and propagate the classified state.

        Args:
            overrides: Optional probe field overrides (`url`, `method`, `headers`, `data`, `params`).

        Returns:
            JSONResponse: Classified state payload, with `state: null` when the probe produced no response.
        """

        try:
            health_state = health_monitor.monitor_update_status(overrides)
        except ValueError as error:
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        if health_state is None:
            payload = {"status": "skipped", "state": None, "code": None}
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

        payload = {
            "status": "published",
            "state": health_state.status_page_value,
            "code": int(health_state),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.put("/components")
    def api_status_components_update(body: dict[str, Any] = Body(...)) -> JSONResponse:
        """Set a state on the given or default components.

        Args:
            body: `{"status": <code or provider string>, "componentIds": ..., "pageId": ...}`.

        Returns:
            JSONResponse: Per-component results; 502 when any component update failed.
        """

        try:
            summary = job_handle_status_update_event(
                event={"body": body},
                status_page_client=status_page_client,
                default_component_ids=settings.component_ids or None,
            )
        except ValueError as error:
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        response_status = status.HTTP_200_OK if not summary.failed_component_ids else status.HTTP_502_BAD_GATEWAY
        return JSONResponse(content=summary.summary_as_payload(), status_code=response_status)

    return router
