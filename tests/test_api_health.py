"""Tests for API foundation and health endpoint behavior."""

from fastapi.testclient import TestClient

from statuspage_monitor.api.application import create_api_application
from statuspage_monitor.config import AppSettings


class _HealthMonitorStub:
    """Minimal monitor stub for API factory dependency injection."""

    def monitor_update_status(self, overrides=None):
        return None

    def monitor_update_status_page(self, state, component_ids=None):
        return None


class _StatusPageClientStub:
    """Minimal Statuspage adapter stub for API factory dependency injection."""

    def client_update_component_status(self, component_id, status, page_id=None):
        return None

    def client_update_components_status(self, component_ids, status, page_id=None):
        return []


def _build_settings(**overrides) -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    values = {
        "environment_name": "test",
        "status_page_api_key": "key",
        "status_page_page_id": "page",
        "api_url": "https://service.test/health",
    }
    values.update(overrides)
    return AppSettings(_env_file=None, **values)


def test_api_foundation_index_reports_environment() -> None:
    """Return service metadata on the index route."""

    client = TestClient(create_api_application(_build_settings(), _HealthMonitorStub(), _StatusPageClientStub()))

    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "statuspage-monitor", "status": "ready", "environment": "test"}


def test_api_health_reports_probe_configuration() -> None:
    """Return HTTP 200 with probe configuration state.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(_build_settings(), _HealthMonitorStub(), _StatusPageClientStub()))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "up", "probe_configured": True, "page_id": "page"}


def test_api_health_reports_missing_probe_url() -> None:
    """Flag an unconfigured probe target without failing liveness."""

    client = TestClient(
        create_api_application(_build_settings(api_url=""), _HealthMonitorStub(), _StatusPageClientStub())
    )

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["probe_configured"] is False
