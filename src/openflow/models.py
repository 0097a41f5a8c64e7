"""Wire models for workflow submissions, state snapshots and results."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import ExecutionError


class WireModel(BaseModel):
    """Immutable model validated from the service's camelCase JSON."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class WorkflowStatus(StrEnum):
    """Statuses reported by the workflow-state endpoint."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ExecutionHandle(WireModel):
    """Acknowledgment returned when a workflow execution is accepted."""

    execution_id: str
    workflow_id: str | None = None
    ipfs_cid: str | None = None
    piece_cid: str | None = None
    provider: str | None = None
    status: str | None = None


class WorkflowStateData(WireModel):
    """Nested execution payload carried by a state snapshot."""

    status: str | None = None
    workflow_id: str | None = None
    execution_id: str | None = None
    input: Any = None
    output: Any = None
    start_time: str | None = None
    completed_time: str | None = None
    error: str | None = None


class WorkflowState(WireModel):
    """Point-in-time snapshot of an execution."""

    execution_id: str
    workflow_id: str | None = None
    ipfs_cid: str | None = None
    # Kept as a plain string so statuses added server-side still validate.
    status: str
    data: WorkflowStateData = WorkflowStateData()

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_completed(self) -> bool:
        return self.status == WorkflowStatus.COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.status == WorkflowStatus.FAILED


class WorkflowResult(WireModel):
    """Final result of a completed execution, with its storage receipts."""

    execution_id: str
    workflow_id: str | None = None
    status: str = WorkflowStatus.COMPLETED.value
    output: Any = None
    ipfs_cid: str | None = None
    piece_cid: str | None = None
    provider: str | None = None
    completed_time: str | None = None

    @classmethod
    def from_completion(cls, handle: ExecutionHandle, state: WorkflowState) -> WorkflowResult:
        """Combine submission receipts with the completed state snapshot.

        Storage receipts for the deal (``piece_cid`` and ``provider``) come from
        the submission acknowledgment; the output, the final IPFS CID and the
        completion time come from the polled state.
        """

        if not state.is_completed:
            raise ExecutionError(
                f"Cannot build a result for execution {state.execution_id}",
                f"status is {state.status!r}, expected 'completed'",
            )
        return cls(
            execution_id=handle.execution_id,
            workflow_id=handle.workflow_id,
            status=state.status,
            output=state.data.output,
            ipfs_cid=state.ipfs_cid,
            piece_cid=handle.piece_cid,
            provider=handle.provider,
            completed_time=state.data.completed_time,
        )


__all__ = [
    "ExecutionHandle",
    "WireModel",
    "WorkflowResult",
    "WorkflowState",
    "WorkflowStateData",
    "WorkflowStatus",
]
