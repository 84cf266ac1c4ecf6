"""FastAPI application factory for the status-page monitor."""

from fastapi import FastAPI

from statuspage_monitor.adapters import StatusPageClientPort
from statuspage_monitor.config import AppSettings
from statuspage_monitor.jobs import HealthMonitorPort

from .routers import api_create_health_router, api_create_status_router


def create_api_application(
    settings: AppSettings,
    health_monitor: HealthMonitorPort,
    status_page_client: StatusPageClientPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        health_monitor: Pipeline triggered by the status check endpoint.
        status_page_client: Statuspage.io adapter used for manual component updates.

    Returns:
        FastAPI: Framework application instance.
    """
    application = FastAPI(title="Status Page Monitor")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service metadata for bootstrap verification."""

        return {
            "service": "statuspage-monitor",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(settings=settings))
    application.include_router(
        api_create_status_router(
            settings=settings,
            health_monitor=health_monitor,
            status_page_client=status_page_client,
        )
    )

    return application
