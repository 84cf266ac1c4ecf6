"""Application bootstrap wiring for startup validation and dependency assembly."""

from __future__ import annotations

from fastapi import FastAPI

from statuspage_monitor.adapters import HttpxProber, LambdaRemoteInvoker, StatusPageIOClient
from statuspage_monitor.api import create_api_application
from statuspage_monitor.config import AppSettings, config_build_probe_defaults, config_load_settings
from statuspage_monitor.jobs import HealthMonitor, HealthMonitorConfig


def bootstrap_create_status_page_client(settings: AppSettings | None = None) -> StatusPageIOClient:
    """Build the Statuspage.io adapter from settings.

    Args:
        settings: Optional preloaded settings.

    Returns:
        StatusPageIOClient: Configured adapter.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return StatusPageIOClient(
        api_key=resolved_settings.status_page_api_key,
        default_page_id=resolved_settings.status_page_page_id,
        base_url=resolved_settings.status_page_base_url,
        request_timeout_seconds=resolved_settings.request_timeout_seconds,
        max_workers=resolved_settings.status_page_max_workers,
    )


def bootstrap_create_health_monitor(settings: AppSettings | None = None) -> HealthMonitor:
    """Build the health monitor with its probe and remote invocation adapters.

    Args:
        settings: Optional preloaded settings.

    Returns:
        HealthMonitor: Fully wired pipeline.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return HealthMonitor(
        prober=HttpxProber(request_timeout_seconds=resolved_settings.request_timeout_seconds),
        remote_invoker=LambdaRemoteInvoker(
            function_name=resolved_settings.settings_status_update_function_name(),
            region_name=resolved_settings.aws_region,
            invocation_type=resolved_settings.status_update_invocation_type,
        ),
        config=HealthMonitorConfig(
            probe_defaults=config_build_probe_defaults(resolved_settings),
            default_component_ids=resolved_settings.component_ids or None,
        ),
    )


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    return create_api_application(
        settings=settings,
        health_monitor=bootstrap_create_health_monitor(settings),
        status_page_client=bootstrap_create_status_page_client(settings),
    )
