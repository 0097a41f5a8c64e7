"""Exceptions raised by the OpenFlow client."""

from __future__ import annotations


class OpenFlowError(RuntimeError):
    """Base class for OpenFlow client failures."""


class ConfigurationError(OpenFlowError):
    """Raised when the client cannot act with its current configuration."""


class TransportError(OpenFlowError):
    """Raised when the service answers with a non-success HTTP status."""

    def __init__(self, context: str, status_code: int, body: str) -> None:
        super().__init__(f"{context}: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class ExecutionError(OpenFlowError):
    """Raised when the service reports a failed request or a failed workflow."""

    def __init__(self, context: str, server_message: str | None = None) -> None:
        self.server_message = server_message or "Unknown error"
        super().__init__(f"{context}: {self.server_message}")


class WorkflowTimeoutError(OpenFlowError, TimeoutError):
    """Raised when a workflow stays non-terminal for the whole poll budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Workflow execution timeout after {attempts} attempts")
        self.attempts = attempts


__all__ = [
    "ConfigurationError",
    "ExecutionError",
    "OpenFlowError",
    "TransportError",
    "WorkflowTimeoutError",
]
