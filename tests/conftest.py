"""Pytest configuration and fixtures for kong-meta tests."""

import json
from typing import Callable, Dict, List

import httpx
import pytest

from kong_meta.services.kong_service import KongAdminService


BASE_URL = "http://kong.test:8001"


# =============================================================================
# ADMIN API FIXTURES
# =============================================================================

class FakeKongAdmin:
    """In-memory Kong admin API served through httpx.MockTransport.

    Routes map a path to a JSON-serialisable body, an ``httpx.Response``,
    or an exception instance that is raised for that request.
    """

    def __init__(self, routes: Dict[str, object]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, content=json.dumps(route).encode(), headers={"Content-Type": "application/json"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def requests_for(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def two_workspace_routes() -> Dict[str, object]:
    """Workspaces a and b with overlapping counters."""
    return {
        "/workspaces": {
            "data": [
                {"name": "a", "id": "11111111-aaaa"},
                {"name": "b", "id": "22222222-bbbb"},
            ]
        },
        "/workspaces/a/meta": {"counts": {"plugins": 2}},
        "/workspaces/b/meta": {"counts": {"plugins": 3, "routes": 1}},
    }


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def make_admin() -> Callable[[Dict[str, object]], FakeKongAdmin]:
    return FakeKongAdmin


@pytest.fixture
def fake_admin(two_workspace_routes) -> FakeKongAdmin:
    return FakeKongAdmin(two_workspace_routes)


@pytest.fixture
def make_service() -> Callable[..., KongAdminService]:
    """Build a KongAdminService against a FakeKongAdmin."""
    services = []

    def _make(admin: FakeKongAdmin, headers=None) -> KongAdminService:
        service = KongAdminService(BASE_URL, headers=headers, transport=admin.transport)
        services.append(service)
        return service

    yield _make

    for service in services:
        service.close()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's Kong environment out of the tests."""
    for name in ("KONG_ADMIN_ADDR", "X_ADMIN_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
