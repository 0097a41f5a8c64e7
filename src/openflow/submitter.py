"""Submission of workflow executions."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from .exceptions import ConfigurationError
from .models import ExecutionHandle
from .responses import parse_payload, read_success_payload
from .transport import Transport

logger = logging.getLogger(__name__)

_TEST_ENDPOINT = "/test-workflow"
_WORKFLOW_ENDPOINT = "/workflow/{slug}"
_CONTEXT = "Workflow execution failed"


def ensure_payment_method(transport: Transport, payment_header: str | None) -> None:
    """Fail fast when a submission could not be paid for."""

    if not transport.signs_payments and not payment_header:
        msg = (
            "Either a private key must be configured on the client or a payment "
            "header must be supplied with the request"
        )
        raise ConfigurationError(msg)


class ExecutionSubmitter:
    """Starts workflow executions and returns the service's acknowledgment."""

    def __init__(self, transport: Transport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    def endpoint(self, slug: str, *, test_mode: bool) -> str:
        if test_mode:
            return f"{self._base_url}{_TEST_ENDPOINT}"
        path = _WORKFLOW_ENDPOINT.format(slug=quote(slug, safe=""))
        return f"{self._base_url}{path}"

    async def submit(
        self,
        slug: str,
        input: Any,
        payment_header: str | None = None,
        *,
        test_mode: bool = True,
    ) -> ExecutionHandle:
        ensure_payment_method(self._transport, payment_header)

        url = self.endpoint(slug, test_mode=test_mode)
        logger.debug("Submitting workflow %s to %s", slug, url)
        response = await self._transport.post(
            url,
            json={"slug": slug, "input": input},
            payment_header=payment_header,
        )
        payload = read_success_payload(response, _CONTEXT)
        handle = parse_payload(ExecutionHandle, payload, _CONTEXT)
        logger.info(
            "Workflow %s accepted as execution %s (status=%s)",
            slug,
            handle.execution_id,
            handle.status or "unknown",
        )
        return handle


__all__ = ["ExecutionSubmitter", "ensure_payment_method"]
