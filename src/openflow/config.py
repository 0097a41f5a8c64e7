"""Client configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://workflow-api.openflow.sh"
DEFAULT_NETWORK = "base-sepolia"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True)
class ClientSettings:
    """Immutable client configuration, optionally sourced from environment variables."""

    private_key: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    poll_interval_seconds: float = 2.0
    max_poll_attempts: int = 150
    request_timeout: float = 30.0
    network: str = DEFAULT_NETWORK

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> ClientSettings:
        return cls(
            private_key=os.getenv("OPENFLOW_PRIVATE_KEY") or None,
            base_url=os.getenv("OPENFLOW_BASE_URL") or cls.base_url,
            poll_interval_seconds=_env_float("OPENFLOW_POLL_INTERVAL", cls.poll_interval_seconds),
            max_poll_attempts=_env_int("OPENFLOW_MAX_POLL_ATTEMPTS", cls.max_poll_attempts),
            request_timeout=_env_float("OPENFLOW_REQUEST_TIMEOUT", cls.request_timeout),
            network=os.getenv("OPENFLOW_NETWORK") or cls.network,
        )

    @property
    def signs_payments(self) -> bool:
        return bool(self.private_key)

    def with_overrides(self, **changes: object) -> ClientSettings:
        """Return a copy with every non-``None`` override applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self

    def validate(self) -> ClientSettings:
        if self.poll_interval_seconds <= 0:
            msg = f"poll interval must be positive, got {self.poll_interval_seconds}"
            raise ConfigurationError(msg)
        if self.max_poll_attempts < 1:
            msg = f"max poll attempts must be at least 1, got {self.max_poll_attempts}"
            raise ConfigurationError(msg)
        if self.request_timeout <= 0:
            msg = f"request timeout must be positive, got {self.request_timeout}"
            raise ConfigurationError(msg)
        if not self.network:
            msg = "payment network must not be empty"
            raise ConfigurationError(msg)
        return self


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_NETWORK", "ClientSettings"]
