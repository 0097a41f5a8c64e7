"""Helpers for reading the service's ``{success, error}`` envelope."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .exceptions import ExecutionError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_success_payload(response: httpx.Response, context: str) -> dict[str, Any]:
    """Return the decoded body of a successful response.

    A non-success HTTP status raises :class:`TransportError`; a body whose
    ``success`` flag is falsy raises :class:`ExecutionError` with the server's
    message, whatever the HTTP status was.
    """

    if not response.is_success:
        raise TransportError(context, response.status_code, response.text)
    try:
        payload = response.json()
    except ValueError as exc:
        raise ExecutionError(context, "response body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ExecutionError(context, "response body is not a JSON object")
    if not payload.get("success"):
        raise ExecutionError(context, payload.get("error"))
    return payload


def parse_payload(model: type[ModelT], payload: dict[str, Any], context: str) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        msg = f"malformed response ({exc.error_count()} validation errors)"
        raise ExecutionError(context, msg) from exc


__all__ = ["parse_payload", "read_success_payload"]
