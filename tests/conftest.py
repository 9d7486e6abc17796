"""
Shared fixtures: isolated settings, a recording fake upstream, and a test client.
"""
from typing import List, Optional, Type

import httpx
import pytest
from fastapi.testclient import TestClient

from minimax_proxy.api.dependencies.upstream import get_http_client
from minimax_proxy.config.settings import get_settings

TEST_API_KEY = "test-key"


class FakeUpstream:
    """Records forwarded requests and replies with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = b'{"choices":[{"index":0,"message":{"role":"assistant","content":"hello"}}]}'
        self.error: Optional[Type[httpx.HTTPError]] = None

    def reply(self, status_code: int, body: bytes) -> None:
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Type[httpx.HTTPError]) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("upstream unreachable", request=request)
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Environment with a credential and no stray .env files."""
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "HOST", "ENVIRONMENT", "FRONTEND_DIR", "FRONTEND_INDEX"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", TEST_API_KEY)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app(env, upstream):
    from main import create_app

    app = create_app()

    async def fake_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler)) as client:
            yield client

    app.dependency_overrides[get_http_client] = fake_http_client
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
