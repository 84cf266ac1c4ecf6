"""Typed domain models shared across runtime layers.

This module provides the health-state enum and the simple data contracts used
between the probe, classification and status-page propagation stages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Any


class HealthState(IntEnum):
    """Component health state with the numeric code used on the wire."""

    OPERATIONAL = 1
    UNDER_MAINTENANCE = 2
    DEGRADED_PERFORMANCE = 3
    PARTIAL_OUTAGE = 4
    MAJOR_OUTAGE = 5

    @property
    def status_page_value(self) -> str:
        """Return the Statuspage.io component status string.

        Returns:
            str: Lower-case provider status value, e.g. `partial_outage`.
        """

        return self.name.lower()

    @classmethod
    def from_code(cls, code: int) -> HealthState:
        """Resolve a numeric state code.

        Args:
            code: Numeric state code in range 1-5.

        Returns:
            HealthState: Matching state.

        Raises:
            ValueError: Raised when code is outside the known range.
        """

        try:
            return cls(int(code))
        except (TypeError, ValueError) as error:
            raise ValueError(f"unknown health state code={code!r}") from error

    @classmethod
    def from_value(cls, value: HealthState | int | str) -> HealthState:
        """Resolve a state from a code, a numeric string or a provider string.

        Args:
            value: Candidate state value.

        Returns:
            HealthState: Matching state.

        Raises:
            ValueError: Raised when the value does not name a known state.
        """

        if isinstance(value, HealthState):
            return value
        if isinstance(value, bool):
            raise ValueError(f"unknown health state value={value!r}")
        if isinstance(value, int):
            return cls.from_code(value)
        if isinstance(value, str):
            normalized_value = value.strip()
            if normalized_value.isdigit():
                return cls.from_code(int(normalized_value))
            for state in cls:
                if state.status_page_value == normalized_value.lower():
                    return state
        raise ValueError(f"unknown health state value={value!r}")


@dataclass(frozen=True)
class ProbeRequest:
    """Configuration for one outbound health-check request.

    Attributes:
        url: Target URL. Blank or None disables the probe.
        method: HTTP method.
        headers: Optional request headers.
        data: Optional JSON body value.
        params: Optional query parameters.
    """

    url: str | None = None
    method: str = "GET"
    headers: Mapping[str, str] | None = None
    data: Any = None
    params: Mapping[str, Any] | None = None

    def merged_with(self, overrides: Mapping[str, Any] | None) -> ProbeRequest:
        """Return a copy with override fields applied one by one.

        A key present in `overrides` replaces the field even when its value is
        None. Missing keys keep the current value.

        Args:
            overrides: Partial field mapping.

        Returns:
            ProbeRequest: Effective request.

        Raises:
            ValueError: Raised when overrides contain unknown field names.
        """

        if not overrides:
            return self

        known_fields = {field.name for field in fields(self)}
        unknown_fields = sorted(set(overrides) - known_fields)
        if unknown_fields:
            raise ValueError(f"unknown probe override fields: {', '.join(unknown_fields)}")
        return replace(self, **dict(overrides))

    def as_mapping(self) -> dict[str, Any]:
        """Return the request as a plain field mapping."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class ProbeOutcome:
    """Normalized probe result for both success and failure responses.

    Attributes:
        succeeded: True for a 2xx response, False for a response taken from the error path.
        status_code: HTTP status code.
        body: Decoded response body text.
        headers: Response headers.
    """

    succeeded: bool
    status_code: int | None
    body: str = ""
    headers: Mapping[str, str] | None = None


@dataclass(frozen=True)
class ComponentTarget:
    """One Statuspage.io component scoped to its page."""

    component_id: str
    page_id: str


@dataclass(frozen=True)
class ComponentUpdateResult:
    """Outcome of one component update inside a batch.

    Attributes:
        target: Component and page the update was addressed to.
        status_code: Provider response status, when a response was received.
        error: Error message when the update failed.
    """

    target: ComponentTarget
    status_code: int | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def component_id(self) -> str:
        return self.target.component_id
