"""Transport layer public exports."""

from __future__ import annotations

import httpx

from .base import HttpxTransport, Transport
from .passthrough import PassthroughTransport
from .signing import DEFAULT_NETWORK, X402Transport, account_from_key, select_requirements


def build_transport(
    private_key: str | None,
    *,
    network: str = DEFAULT_NETWORK,
    client: httpx.AsyncClient | None = None,
    timeout: float = 30.0,
) -> Transport:
    """Select the signing transport when a key is configured, else the pass-through one."""

    if private_key:
        return X402Transport(
            account_from_key(private_key),
            network=network,
            client=client,
            timeout=timeout,
        )
    return PassthroughTransport(client=client, timeout=timeout)


__all__ = [
    "DEFAULT_NETWORK",
    "HttpxTransport",
    "PassthroughTransport",
    "Transport",
    "X402Transport",
    "account_from_key",
    "build_transport",
    "select_requirements",
]
