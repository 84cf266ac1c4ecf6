"""Job layer package for workflow orchestration boundaries."""

from .health_monitor import HealthMonitor, HealthMonitorConfig, job_classify_http_status
from .interfaces import HealthMonitorPort
from .status_update import StatusUpdateSummary, job_extract_status_update_body, job_handle_status_update_event

__all__ = [
	"HealthMonitor",
	"HealthMonitorConfig",
	"HealthMonitorPort",
	"StatusUpdateSummary",
	"job_classify_http_status",
	"job_extract_status_update_body",
	"job_handle_status_update_event",
]
