"""Domain models used across application layer boundaries."""

from .models import ComponentTarget, ComponentUpdateResult, HealthState, ProbeOutcome, ProbeRequest

__all__ = ["ComponentTarget", "ComponentUpdateResult", "HealthState", "ProbeOutcome", "ProbeRequest"]
