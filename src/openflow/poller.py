"""Polling of execution state until a terminal status is reached."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from urllib.parse import quote

from .exceptions import ExecutionError, WorkflowTimeoutError
from .models import WorkflowState, WorkflowStatus
from .responses import parse_payload, read_success_payload
from .transport import Transport

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]

_STATE_ENDPOINT = "/workflow-state/{execution_id}"
_CONTEXT = "Failed to get workflow state"


class StatePoller:
    """Queries execution state once, or repeatedly until it is terminal."""

    def __init__(
        self,
        transport: Transport,
        base_url: str,
        *,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._sleep = sleep

    async def fetch_state(self, execution_id: str) -> WorkflowState:
        """Query the current state exactly once."""

        path = _STATE_ENDPOINT.format(execution_id=quote(execution_id, safe=""))
        response = await self._transport.get(f"{self._base_url}{path}")
        payload = read_success_payload(response, _CONTEXT)
        return parse_payload(WorkflowState, payload, _CONTEXT)

    async def poll_until_terminal(
        self,
        execution_id: str,
        interval: float,
        max_attempts: int,
    ) -> WorkflowState:
        """Poll until the execution completes.

        ``failed`` raises :class:`ExecutionError` straight away and any other
        non-completed status, including ones this client does not know, waits
        ``interval`` seconds before the next query. Query errors are not
        retried. Running out of attempts raises :class:`WorkflowTimeoutError`.
        """

        if max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {max_attempts}"
            raise ValueError(msg)

        for attempt in range(1, max_attempts + 1):
            state = await self.fetch_state(execution_id)
            if state.is_completed:
                logger.info("Execution %s completed after %d polls", execution_id, attempt)
                return state
            if state.is_failed:
                logger.warning(
                    "Execution %s failed after %d polls: %s",
                    execution_id,
                    attempt,
                    state.data.error or "Unknown error",
                )
                raise ExecutionError("Workflow execution failed", state.data.error)
            if state.status != WorkflowStatus.PROCESSING:
                logger.debug("Execution %s reported unknown status %r", execution_id, state.status)
            logger.debug(
                "Execution %s still %s (attempt %d/%d)",
                execution_id,
                state.status,
                attempt,
                max_attempts,
            )
            if attempt < max_attempts:
                await self._sleep(interval)

        logger.warning("Execution %s timed out after %d polls", execution_id, max_attempts)
        raise WorkflowTimeoutError(max_attempts)


__all__ = ["Sleeper", "StatePoller"]
