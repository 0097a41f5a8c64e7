"""Transport that forwards a caller-supplied payment header."""

from __future__ import annotations

from typing import Any

import httpx

from .base import JSON_HEADERS, PAYMENT_HEADER, HttpxTransport


class PassthroughTransport(HttpxTransport):
    """Sends submissions unmodified apart from the manual ``X-Payment`` header."""

    signs_payments = False

    async def post(
        self,
        url: str,
        *,
        json: Any,
        payment_header: str | None = None,
    ) -> httpx.Response:
        headers = dict(JSON_HEADERS)
        if payment_header:
            headers[PAYMENT_HEADER] = payment_header
        async with self._client_scope() as client:
            return await client.post(url, json=json, headers=headers)


__all__ = ["PassthroughTransport"]
