"""AWS Lambda entry points for the health check and status-update functions."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from statuspage_monitor.bootstrap import bootstrap_create_health_monitor, bootstrap_create_status_page_client
from statuspage_monitor.config import config_load_settings
from statuspage_monitor.jobs import job_handle_status_update_event
from statuspage_monitor.log import setup_logging

_JSON_HEADERS = {"Content-Type": "application/json", "Cache-Control": "no-store"}


def handler_health_check(event: dict[str, Any] | None, context: Any) -> dict[str, Any]:
    """Run one probe and publish the classified state.

    Scheduled triggers pass no overrides; manual invocations may pass
    `{"overrides": {...}}` with probe fields.
    """
    settings = config_load_settings()
    setup_logging(service_name="statuspage-monitor-check", log_level=settings.log_level)

    overrides = (event or {}).get("overrides") if isinstance(event, dict) else None
    health_monitor = bootstrap_create_health_monitor(settings)
    health_state = health_monitor.monitor_update_status(overrides)

    if health_state is None:
        logger.warning("Health check produced no probe response; nothing published")
        return {"state": None, "code": None}
    return {"state": health_state.status_page_value, "code": int(health_state)}


def handler_status_update(event: dict[str, Any] | None, context: Any) -> dict[str, Any]:
    """Apply the state carried by `{"body": {"status", "componentIds", "pageId"}}` to Statuspage.io components."""
    settings = config_load_settings()
    setup_logging(service_name="statuspage-monitor-update", log_level=settings.log_level)

    try:
        summary = job_handle_status_update_event(
            event=event,
            status_page_client=bootstrap_create_status_page_client(settings),
            default_component_ids=settings.component_ids or None,
        )
    except ValueError as error:
        logger.error(f"Rejected status update event: {error}")
        return {"statusCode": 400, "headers": _JSON_HEADERS, "body": json.dumps({"error": str(error)})}

    status_code = 200 if not summary.failed_component_ids else 502
    return {"statusCode": status_code, "headers": _JSON_HEADERS, "body": json.dumps(summary.summary_as_payload())}
