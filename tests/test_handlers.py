"""Tests for Lambda entry points and CLI commands."""

from __future__ import annotations

import json

import pytest

import statuspage_monitor.handlers as handlers_module
import statuspage_monitor.main as main_module
from statuspage_monitor.config import AppSettings
from statuspage_monitor.domain import ComponentTarget, ComponentUpdateResult, HealthState


class _HealthMonitorStub:
    """Monitor double returning a canned state."""

    def __init__(self, state: HealthState | None):
        self.overrides: list[object] = []
        self._state = state

    def monitor_update_status(self, overrides=None):
        self.overrides.append(overrides)
        return self._state


class _StatusPageClientStub:
    """Statuspage adapter double recording batch calls."""

    def __init__(self):
        self.calls: list[tuple[object, object, object]] = []

    def client_update_components_status(self, component_ids, status, page_id=None):
        self.calls.append((component_ids, status, page_id))
        return [
            ComponentUpdateResult(target=ComponentTarget(component_id=component_id, page_id="page"), status_code=200)
            for component_id in component_ids.split(",")
        ]


def _build_settings() -> AppSettings:
    """Create deterministic settings for entry point tests."""

    return AppSettings(
        _env_file=None,
        status_page_api_key="key",
        status_page_page_id="page",
        component_ids="a,b",
    )


@pytest.fixture
def patched_entry_points(monkeypatch: pytest.MonkeyPatch):
    """Patch settings loading and dependency wiring in entry point modules.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        dict[str, object]: Installed test doubles keyed by role.
    """

    doubles = {
        "monitor": _HealthMonitorStub(state=HealthState.MAJOR_OUTAGE),
        "client": _StatusPageClientStub(),
    }
    for module in (handlers_module, main_module):
        monkeypatch.setattr(module, "config_load_settings", _build_settings)
        monkeypatch.setattr(module, "bootstrap_create_health_monitor", lambda settings=None: doubles["monitor"])
        monkeypatch.setattr(module, "bootstrap_create_status_page_client", lambda settings=None: doubles["client"])
    return doubles


def test_handlers_health_check_returns_published_state(patched_entry_points) -> None:
    """Run the pipeline with event overrides and report the state.

    Returns:
        None: Assertions validate handler payload.

    Raises:
        AssertionError: Raised when handler output is malformed.
    """

    result = handlers_module.handler_health_check({"overrides": {"method": "HEAD"}}, None)

    assert result == {"state": "major_outage", "code": 5}
    assert patched_entry_points["monitor"].overrides == [{"method": "HEAD"}]


def test_handlers_health_check_reports_skipped_probe(patched_entry_points) -> None:
    """Return null state when the pipeline produced nothing."""

    patched_entry_points["monitor"] = _HealthMonitorStub(state=None)

    assert handlers_module.handler_health_check({}, None) == {"state": None, "code": None}


def test_handlers_status_update_applies_event_state(patched_entry_points) -> None:
    """Apply the event state and return an API-gateway style response."""

    result = handlers_module.handler_status_update({"body": {"status": 3, "componentIds": "x,y"}}, None)

    assert result["statusCode"] == 200
    assert json.loads(result["body"])["statusValue"] == "degraded_performance"
    assert patched_entry_points["client"].calls == [("x,y", HealthState.DEGRADED_PERFORMANCE, None)]


def test_handlers_status_update_honors_body_page_id(patched_entry_points) -> None:
    """Update components on the page named by the event body."""

    result = handlers_module.handler_status_update({"body": {"status": 1, "componentIds": "x", "pageId": "p2"}}, None)

    assert result["statusCode"] == 200
    assert patched_entry_points["client"].calls == [("x", HealthState.OPERATIONAL, "p2")]


def test_handlers_status_update_rejects_invalid_event(patched_entry_points) -> None:
    """Return 400 for events without a status."""

    result = handlers_module.handler_status_update({"body": {}}, None)

    assert result["statusCode"] == 400
    assert patched_entry_points["client"].calls == []


def test_main_check_prints_state(patched_entry_points, capsys: pytest.CaptureFixture[str]) -> None:
    """Print the classified state for the `check` command."""

    main_module.main(["check"])

    assert "STATE: major_outage (5)" in capsys.readouterr().out


def test_main_set_status_uses_default_components(patched_entry_points, capsys: pytest.CaptureFixture[str]) -> None:
    """Publish an explicit state to the configured components."""

    main_module.main(["set-status", "--status", "under_maintenance"])

    assert patched_entry_points["client"].calls == [("a,b", HealthState.UNDER_MAINTENANCE, None)]
    assert "a: ok" in capsys.readouterr().out


def test_main_set_status_requires_status(patched_entry_points) -> None:
    """Exit when `set-status` is called without a state."""

    with pytest.raises(SystemExit):
        main_module.main(["set-status"])
