"""Adapter layer package for outbound integration boundaries."""

from .errors import (
	ProbeRequestError,
	RemoteInvocationError,
	StatusMonitorAdapterError,
	StatusPageUpdateError,
)
from .http_prober import HttpxProber
from .interfaces import HttpProberPort, RemoteInvocationResult, RemoteInvokerPort, StatusPageClientPort
from .lambda_invoker import LambdaRemoteInvoker
from .status_page_io import StatusPageIOClient, client_split_component_ids

__all__ = [
	"HttpProberPort",
	"HttpxProber",
	"LambdaRemoteInvoker",
	"ProbeRequestError",
	"RemoteInvocationError",
	"RemoteInvocationResult",
	"RemoteInvokerPort",
	"StatusMonitorAdapterError",
	"StatusPageClientPort",
	"StatusPageIOClient",
	"StatusPageUpdateError",
	"client_split_component_ids",
]
