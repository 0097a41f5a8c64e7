"""High-level OpenFlow client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from .config import ClientSettings
from .models import WorkflowResult, WorkflowState
from .poller import Sleeper, StatePoller
from .submitter import ExecutionSubmitter, ensure_payment_method
from .transport import Transport, build_transport

logger = logging.getLogger(__name__)


class OpenFlow:
    """Runs workflows on an OpenFlow server and waits for their results.

    Submissions are paid for with x402. When a private key is configured the
    client signs payments itself; otherwise every :meth:`run` call must carry
    a pre-signed ``payment_header``.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        private_key: str | None = None,
        base_url: str | None = None,
        poll_interval: float | None = None,
        max_poll_attempts: int | None = None,
        network: str | None = None,
        transport: Transport | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        resolved = (settings or ClientSettings()).with_overrides(
            private_key=private_key,
            base_url=base_url,
            poll_interval_seconds=poll_interval,
            max_poll_attempts=max_poll_attempts,
            network=network,
        )
        self._settings = resolved.validate()
        self._transport = transport or build_transport(
            resolved.private_key,
            network=resolved.network,
            client=http_client,
            timeout=resolved.request_timeout,
        )
        self._submitter = ExecutionSubmitter(self._transport, resolved.base_url)
        self._poller = StatePoller(self._transport, resolved.base_url, sleep=sleep)

    @classmethod
    def from_env(cls, **kwargs: Any) -> OpenFlow:
        """Build a client from ``OPENFLOW_*`` environment variables."""

        return cls(ClientSettings.from_env(), **kwargs)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def signs_payments(self) -> bool:
        return self._transport.signs_payments

    async def run(
        self,
        slug: str,
        *,
        input: Any = None,
        payment_header: str | None = None,
        test_mode: bool = True,
    ) -> WorkflowResult:
        """Execute a workflow and wait for it to complete."""

        ensure_payment_method(self._transport, payment_header)

        handle = await self._submitter.submit(
            slug,
            {} if input is None else input,
            payment_header,
            test_mode=test_mode,
        )
        state = await self._poller.poll_until_terminal(
            handle.execution_id,
            self._settings.poll_interval_seconds,
            self._settings.max_poll_attempts,
        )
        return WorkflowResult.from_completion(handle, state)

    async def get_state(self, execution_id: str) -> WorkflowState:
        """Return the current state of an execution without polling."""

        return await self._poller.fetch_state(execution_id)


__all__ = ["OpenFlow"]
