"""Transport contracts shared by the submitter and the poller."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol, runtime_checkable

import httpx

JSON_HEADERS = {"Content-Type": "application/json"}
PAYMENT_HEADER = "X-Payment"


@runtime_checkable
class Transport(Protocol):
    """HTTP capability used to reach the workflow service.

    Implementations decide once, at construction, whether submissions are paid
    for automatically (``signs_payments``) or carry a caller-supplied payment
    header. State queries are never paid for.
    """

    signs_payments: bool

    async def post(
        self,
        url: str,
        *,
        json: Any,
        payment_header: str | None = None,
    ) -> httpx.Response: ...

    async def get(self, url: str) -> httpx.Response: ...


class HttpxTransport:
    """Plain httpx transport scoped per call unless a client is injected."""

    signs_payments = False

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def get(self, url: str) -> httpx.Response:
        async with self._client_scope() as client:
            return await client.get(url, headers=JSON_HEADERS)

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


__all__ = ["JSON_HEADERS", "PAYMENT_HEADER", "HttpxTransport", "Transport"]
