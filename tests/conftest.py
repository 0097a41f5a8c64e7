from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

# Ensure the src/ directory is importable when tests run from a checkout.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

BASE_URL = "http://openflow.test"


def acknowledgment(execution_id: str = "e1", **overrides: Any) -> dict[str, Any]:
    payload = {
        "success": True,
        "executionId": execution_id,
        "workflowId": "wf-demo",
        "ipfsCid": "bafy-submitted",
        "pieceCid": "baga-piece",
        "provider": "https://sp.example",
        "status": "processing",
    }
    payload.update(overrides)
    return payload


def state(status: str, execution_id: str = "e1", **data: Any) -> dict[str, Any]:
    return {
        "success": True,
        "executionId": execution_id,
        "workflowId": "wf-demo",
        "ipfsCid": f"bafy-{status}",
        "status": status,
        "data": {
            "status": status,
            "workflowId": "wf-demo",
            "executionId": execution_id,
            "input": {"x": 1},
            **data,
        },
    }


class FakeWorkflowServer:
    """In-memory stand-in for the workflow service.

    State responses are served in order; the last one repeats once the queue
    runs dry.
    """

    def __init__(
        self,
        states: list[dict[str, Any] | httpx.Response] | None = None,
        *,
        submit_response: httpx.Response | None = None,
    ) -> None:
        self.states = list(states or [state("processing")])
        self.submit_response = submit_response or httpx.Response(200, json=acknowledgment())
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return self.submit_response
        if request.url.path.startswith("/workflow-state/"):
            item = self.states.pop(0) if len(self.states) > 1 else self.states[0]
            if isinstance(item, httpx.Response):
                return item
            return httpx.Response(200, json=item)
        return httpx.Response(404, json={"success": False, "error": "not found"})

    @property
    def submissions(self) -> list[httpx.Request]:
        return [request for request in self.requests if request.method == "POST"]

    @property
    def queries(self) -> list[httpx.Request]:
        return [request for request in self.requests if request.method == "GET"]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> RecordingSleep:
    return RecordingSleep()
