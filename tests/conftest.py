"""Shared fixtures: a recording httpx mock transport and clients wired to it."""

import json

import httpx
import pytest

from pterodactyl_client import applicationapi

BASE_URL = "https://panel.example.com"
API_KEY = "ptla_secret"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses.

    Responses queued with :meth:`respond` are returned in order; once the
    queue is empty every request gets ``200 {}``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def respond(self, status_code: int = 200, **kwargs) -> None:
        self._responses.append(httpx.Response(status_code, **kwargs))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def api_client(handler: RecordingHandler) -> applicationapi.ApplicationApiClient:
    """ApplicationApiClient whose requests never leave the process."""
    return applicationapi.ApplicationApiClient(
        base_url=BASE_URL,
        api_key=API_KEY,
        user_agent="tests/1.0",
        transport=httpx.MockTransport(handler),
    )


def _envelope(object_name: str, attributes: dict) -> dict:
    return {"object": object_name, "attributes": attributes}


def _page(object_name: str, items: list[dict], total: int | None = None) -> dict:
    total = len(items) if total is None else total
    return {
        "object": "list",
        "data": [_envelope(object_name, item) for item in items],
        "meta": {
            "pagination": {
                "total": total,
                "count": len(items),
                "per_page": 50,
                "current_page": 1,
                "total_pages": 1,
                "links": {},
            },
        },
    }


@pytest.fixture
def envelope():
    """Builder for single-entity response envelopes."""
    return _envelope


@pytest.fixture
def page():
    """Builder for one-page collection responses."""
    return _page
