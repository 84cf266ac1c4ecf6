"""Regression tests for health-state and probe request domain models."""

import pytest

from statuspage_monitor.domain import ComponentTarget, ComponentUpdateResult, HealthState, ProbeRequest


def test_domain_health_state_codes_and_provider_values() -> None:
    """Expose wire codes 1-5 and the Statuspage.io status strings.

    Returns:
        None: Assertions validate enum contract.

    Raises:
        AssertionError: Raised when codes or provider values drift.
    """

    assert [int(state) for state in HealthState] == [1, 2, 3, 4, 5]
    assert [state.status_page_value for state in HealthState] == [
        "operational",
        "under_maintenance",
        "degraded_performance",
        "partial_outage",
        "major_outage",
    ]


@pytest.mark.parametrize(
    ("raw_value", "expected_state"),
    [
        (1, HealthState.OPERATIONAL),
        ("4", HealthState.PARTIAL_OUTAGE),
        ("under_maintenance", HealthState.UNDER_MAINTENANCE),
        (" MAJOR_OUTAGE ", HealthState.MAJOR_OUTAGE),
        (HealthState.DEGRADED_PERFORMANCE, HealthState.DEGRADED_PERFORMANCE),
    ],
)
def test_domain_health_state_from_value_accepts_codes_and_names(raw_value, expected_state) -> None:
    """Resolve states from codes, numeric strings and provider names."""

    assert HealthState.from_value(raw_value) is expected_state


@pytest.mark.parametrize("raw_value", [0, 6, "offline", True, None, 2.5])
def test_domain_health_state_from_value_rejects_unknown_values(raw_value) -> None:
    """Reject values that do not name a state."""

    with pytest.raises(ValueError, match="unknown health state"):
        HealthState.from_value(raw_value)


def test_domain_probe_request_merge_applies_overrides_field_by_field() -> None:
    """Fill untouched fields from defaults and replace only overridden ones.

    Returns:
        None: Assertions validate merge semantics.

    Raises:
        AssertionError: Raised when overrides replace the whole request.
    """

    defaults = ProbeRequest(
        url="https://service.test/health",
        method="POST",
        headers={"X-Token": "abc"},
        data={"ping": True},
        params={"mac": "c4:2a:fe"},
    )

    merged = defaults.merged_with({"data": {"username": "la"}})

    assert merged.as_mapping() == {
        "url": "https://service.test/health",
        "method": "POST",
        "headers": {"X-Token": "abc"},
        "data": {"username": "la"},
        "params": {"mac": "c4:2a:fe"},
    }


def test_domain_probe_request_merge_keeps_explicit_none_overrides() -> None:
    """Treat an explicit None override as a value, not as a missing field."""

    defaults = ProbeRequest(url="https://service.test/health", headers={"X-Token": "abc"})

    merged = defaults.merged_with({"headers": None})

    assert merged.headers is None
    assert merged.url == "https://service.test/health"


def test_domain_probe_request_merge_rejects_unknown_fields() -> None:
    """Raise ValueError for override keys that are not probe fields."""

    with pytest.raises(ValueError, match="unknown probe override fields: body"):
        ProbeRequest(url="https://service.test").merged_with({"body": "x"})


def test_domain_component_update_result_reports_success_from_error() -> None:
    """Derive success from the absence of an error message."""

    target = ComponentTarget(component_id="cmp-1", page_id="page")

    assert ComponentUpdateResult(target=target, status_code=200).succeeded
    assert not ComponentUpdateResult(target=target, status_code=500, error="boom").succeeded
    assert ComponentUpdateResult(target=target).component_id == "cmp-1"
