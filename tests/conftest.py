"""
Shared fixtures: settings pinned to a fake backend and an httpx
MockTransport that records every request.
"""

import json
import time

import httpx
import jwt
import pytest

from legasi_dms.adapters import HttpAuthApi, HttpDashboardApi, MemorySessionRepository
from legasi_dms.config import Settings

BASE_URL = "http://dms.test/api/v1"


class FakeBackend:
    """
    Route table for httpx.MockTransport.

    Routes map "METHOD /path" to a (status, body) tuple or to a callable
    taking the request and returning one. Unrouted requests get a 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def route(self, method, path, status=200, body=None, handler=None):
        self.routes[f"{method} /api/v1{path}"] = handler or (lambda request: (status, body))

    def calls(self, method, path):
        return [r for r in self.requests if r.method == method and r.url.path == f"/api/v1{path}"]

    def json_of(self, request):
        return json.loads(request.content)

    def __call__(self, request):
        self.requests.append(request)
        handler = self.routes.get(f"{request.method} {request.url.path}")
        if handler is None:
            return httpx.Response(404, json={"message": "Not found"})

        status, body = handler(request)
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, content=body or b"")


@pytest.fixture
def token():
    """JWT with an ``exp`` claim one hour out."""
    return jwt.encode({"sub": "1", "exp": int(time.time()) + 3600}, "test-secret", algorithm="HS256")


@pytest.fixture
def settings():
    return Settings(api_base_url=BASE_URL, _env_file=None)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def http_client(backend):
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(backend))
    yield client
    client.close()


@pytest.fixture
def sessions():
    return MemorySessionRepository()


@pytest.fixture
def auth_api(settings, http_client):
    return HttpAuthApi(settings=settings, client=http_client)


@pytest.fixture
def dashboard_api(settings, http_client, sessions):
    return HttpDashboardApi(sessions, settings=settings, client=http_client)


class RecordingNotifier:
    """Collects alerts instead of showing them."""

    def __init__(self):
        self.alerts = []

    def success(self, title, text):
        self.alerts.append(("success", title, text))

    def error(self, title, text):
        self.alerts.append(("error", title, text))


@pytest.fixture
def notifier():
    return RecordingNotifier()
