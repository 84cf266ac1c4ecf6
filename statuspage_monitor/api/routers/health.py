"""Health endpoint router for service liveness."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from statuspage_monitor.config import AppSettings


def api_create_health_router(settings: AppSettings) -> APIRouter:
    """Create liveness router reporting whether a probe target is configured.

    Args:
        settings: Validated application settings.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when settings are missing.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application liveness and probe configuration state."""

        payload = {
            "status": "ok",
            "app": "up",
            "probe_configured": bool(settings.api_url.strip()),
            "page_id": settings.status_page_page_id,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
