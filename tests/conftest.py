"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from main import app  # noqa: E402
from swot_ai.routers.proxy import get_relay  # noqa: E402
from swot_ai.services.relay import ActionRelay  # noqa: E402


def gemini_body(answer) -> dict:
    """Wrap ``answer`` the way generateContent returns it."""
    text = answer if isinstance(answer, str) else json.dumps(answer)
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeGemini:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = gemini_body({"explanation": "ok"})
        self.error: Exception | None = None

    def reply(self, body=None, status_code: int = 200):
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body or "")

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def make_client(gemini):
    """Build a TestClient whose relay talks to the fake Gemini."""

    def _make(api_key: str = "test-key") -> TestClient:
        relay = ActionRelay(api_key=api_key, transport=httpx.MockTransport(gemini.handler))
        app.dependency_overrides[get_relay] = lambda: relay
        return TestClient(app, raise_server_exceptions=False)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()
