import json

import httpx
import pytest

from coolify_mcp.core.client import CoolifyClient
from coolify_mcp.core.config import Settings
from coolify_mcp.dispatcher import ToolDispatcher

SETTINGS = Settings(base_url="https://coolify.test", api_token="secret-token", timeout=5000)


class Recorder:
    """httpx.MockTransport handler that records requests and replies with a canned response."""

    def __init__(self, status_code=200, body=None):
        self.requests = []
        self.status_code = status_code
        self.body = {"ok": True} if body is None else body
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(recorder):
    return CoolifyClient(SETTINGS, transport=httpx.MockTransport(recorder))


@pytest.fixture
def dispatcher(client):
    return ToolDispatcher(client)
