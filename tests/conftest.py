"""Shared fixtures: isolated Strapi settings and a mock HTTP transport."""

import httpx
import pytest

import strapi_mcp_server as server


@pytest.fixture(autouse=True)
def strapi_config(monkeypatch):
    """Point the server at a fake Strapi with an API token configured."""
    monkeypatch.setattr(server, "STRAPI_URL", "http://strapi.test")
    monkeypatch.setattr(server, "API_TOKEN", "test-token")
    monkeypatch.setattr(server, "ADMIN_EMAIL", "")
    monkeypatch.setattr(server, "ADMIN_PASSWORD", "")
    server.reset_token()
    yield
    server.reset_token()


@pytest.fixture
def admin_login(monkeypatch):
    """Switch to admin email/password authentication."""
    monkeypatch.setattr(server, "API_TOKEN", "")
    monkeypatch.setattr(server, "ADMIN_EMAIL", "admin@example.com")
    monkeypatch.setattr(server, "ADMIN_PASSWORD", "secret")


@pytest.fixture
def mock_strapi(monkeypatch):
    """Route every httpx.AsyncClient the server creates through a handler.

    Returns an installer taking ``handler(request) -> httpx.Response``; the
    installer returns the list of recorded requests.
    """
    real_client = httpx.AsyncClient

    def install(handler):
        requests = []

        def recording(request):
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        monkeypatch.setattr(
            server.httpx,
            "AsyncClient",
            lambda **kwargs: real_client(transport=transport, **kwargs),
        )
        return requests

    return install
