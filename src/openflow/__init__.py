"""OpenFlow client: run paid workflows and collect their storage receipts."""

from .client import OpenFlow
from .config import DEFAULT_BASE_URL, DEFAULT_NETWORK, ClientSettings
from .exceptions import (
    ConfigurationError,
    ExecutionError,
    OpenFlowError,
    TransportError,
    WorkflowTimeoutError,
)
from .models import (
    ExecutionHandle,
    WorkflowResult,
    WorkflowState,
    WorkflowStateData,
    WorkflowStatus,
)
from .poller import StatePoller
from .submitter import ExecutionSubmitter
from .transport import PassthroughTransport, Transport, X402Transport, build_transport

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_NETWORK",
    "ClientSettings",
    "ConfigurationError",
    "ExecutionError",
    "ExecutionHandle",
    "ExecutionSubmitter",
    "OpenFlow",
    "OpenFlowError",
    "PassthroughTransport",
    "StatePoller",
    "Transport",
    "TransportError",
    "WorkflowResult",
    "WorkflowState",
    "WorkflowStateData",
    "WorkflowStatus",
    "WorkflowTimeoutError",
    "X402Transport",
    "build_transport",
]
