from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from conftest import BASE_URL, FakeWorkflowServer, acknowledgment

from openflow import (
    ConfigurationError,
    ExecutionError,
    ExecutionHandle,
    ExecutionSubmitter,
    TransportError,
)
from openflow.transport import PassthroughTransport


def _submit(server: FakeWorkflowServer, slug: str = "demo", **kwargs: object) -> ExecutionHandle:
    async def _run() -> ExecutionHandle:
        async with server.client() as http:
            submitter = ExecutionSubmitter(PassthroughTransport(client=http), BASE_URL + "/")
            return await submitter.submit(slug, {"x": 1}, **kwargs)  # type: ignore[arg-type]

    return asyncio.run(_run())


def test_submit_parses_acknowledgment() -> None:
    server = FakeWorkflowServer(submit_response=httpx.Response(201, json=acknowledgment("e42")))
    handle = _submit(server, payment_header="hdr")

    assert handle.execution_id == "e42"
    assert handle.workflow_id == "wf-demo"
    assert handle.ipfs_cid == "bafy-submitted"
    assert handle.piece_cid == "baga-piece"
    assert handle.provider == "https://sp.example"
    assert handle.status == "processing"


def test_production_mode_targets_slug_endpoint() -> None:
    server = FakeWorkflowServer()
    _submit(server, "image resize", payment_header="hdr", test_mode=False)

    submission = server.submissions[0]
    assert submission.url.raw_path == b"/workflow/image%20resize"
    assert json.loads(submission.content) == {"slug": "image resize", "input": {"x": 1}}


def test_submit_requires_payment_header_without_signing() -> None:
    server = FakeWorkflowServer()
    with pytest.raises(ConfigurationError):
        _submit(server)
    assert server.requests == []


def test_submit_rejects_non_json_body() -> None:
    server = FakeWorkflowServer(submit_response=httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ExecutionError, match="not valid JSON"):
        _submit(server, payment_header="hdr")


def test_payload_failure_without_message_reports_unknown_error() -> None:
    server = FakeWorkflowServer(submit_response=httpx.Response(200, json={"success": False}))
    with pytest.raises(ExecutionError, match="Unknown error"):
        _submit(server, payment_header="hdr")


def test_http_error_status_is_a_transport_error_even_with_payload() -> None:
    server = FakeWorkflowServer(
        submit_response=httpx.Response(500, json={"success": False, "error": "engine down"}),
    )
    with pytest.raises(TransportError) as excinfo:
        _submit(server, payment_header="hdr")
    assert excinfo.value.status_code == 500
    assert "engine down" in str(excinfo.value)


def test_acknowledgment_missing_execution_id_is_an_execution_error() -> None:
    ack = acknowledgment()
    ack.pop("executionId")
    server = FakeWorkflowServer(submit_response=httpx.Response(200, json=ack))
    with pytest.raises(ExecutionError, match="malformed response"):
        _submit(server, payment_header="hdr")
