"""Transport that pays for submissions with x402 signed payment headers."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import ValidationError
from x402.clients.base import x402Client
from x402.types import PaymentRequirements, x402PaymentRequiredResponse

from ..config import DEFAULT_NETWORK
from ..exceptions import ConfigurationError
from .base import JSON_HEADERS, PAYMENT_HEADER, HttpxTransport

logger = logging.getLogger(__name__)

PAYMENT_REQUIRED = 402


def account_from_key(private_key: str) -> LocalAccount:
    """Build the signing account, never echoing the key on failure."""

    try:
        return Account.from_key(private_key)
    except (ValueError, TypeError) as exc:
        msg = "private key is not a valid secp256k1 key"
        raise ConfigurationError(msg) from exc


def select_requirements(
    accepts: list[PaymentRequirements],
    network: str,
) -> PaymentRequirements:
    """Pick the first ``exact`` requirement offered on ``network``."""

    for requirements in accepts:
        if requirements.network == network and requirements.scheme == "exact":
            return requirements
    offered = ", ".join(sorted({str(item.network) for item in accepts})) or "none"
    msg = f"server accepts no payment on network {network} (offered: {offered})"
    raise ConfigurationError(msg)


class X402Transport(HttpxTransport):
    """Signs submissions automatically when the service answers 402.

    The first POST goes out unpaid. A 402 answer carries the accepted payment
    requirements; the one matching ``network`` is signed with the account and
    the POST is repeated once with the ``X-Payment`` header, through the same
    client. Any other answer, including a second 402, is returned unchanged.
    State queries are never paid for.
    """

    signs_payments = True

    def __init__(
        self,
        account: LocalAccount,
        *,
        network: str = DEFAULT_NETWORK,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(client=client, timeout=timeout)
        self._account = account
        self._network = network
        self._signer = x402Client(account)

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def network(self) -> str:
        return self._network

    async def post(
        self,
        url: str,
        *,
        json: Any,
        payment_header: str | None = None,
    ) -> httpx.Response:
        if payment_header:
            logger.debug("Ignoring manual payment header; %s signs payments", self.address)
        async with self._client_scope() as client:
            response = await client.post(url, json=json, headers=dict(JSON_HEADERS))
            if response.status_code != PAYMENT_REQUIRED:
                return response

            signed = self._sign_challenge(response)
            if signed is None:
                return response
            logger.debug("Paying for %s on %s from %s", url, self._network, self.address)
            headers = dict(JSON_HEADERS)
            headers[PAYMENT_HEADER] = signed
            return await client.post(url, json=json, headers=headers)

    def _sign_challenge(self, response: httpx.Response) -> str | None:
        try:
            challenge = x402PaymentRequiredResponse(**response.json())
        except (ValueError, TypeError, ValidationError):
            logger.warning("Unreadable payment challenge from %s", response.request.url)
            return None
        requirements = select_requirements(list(challenge.accepts), self._network)
        return self._signer.create_payment_header(requirements, challenge.x402_version)


__all__ = ["DEFAULT_NETWORK", "X402Transport", "account_from_key", "select_requirements"]
