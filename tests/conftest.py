"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Generator

import httpx
import pytest

from reqw.core import Settings, get_settings

BASE_URL = "https://example.com"


def _handler(request: httpx.Request) -> httpx.Response:
    """Answer ``/status/<code>`` with that code; ``/refused`` fails to connect."""
    path = request.url.path
    if path == "/refused":
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
    if path == "/timeout":
        raise httpx.ReadTimeout("timed out", request=request)
    if path.startswith("/status/"):
        return httpx.Response(int(path.rsplit("/", 1)[-1]), text="body")
    return httpx.Response(404, text="not found")


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Don't let cached settings leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with outcome logging on."""
    return Settings(environment="development", log_level="DEBUG", log_outcomes=True)


@pytest.fixture
def mock_transport() -> httpx.MockTransport:
    """Transport that never touches the network."""
    return httpx.MockTransport(_handler)


@pytest.fixture
def client(mock_transport: httpx.MockTransport) -> Generator[httpx.Client, None, None]:
    """Sync httpx client backed by the mock transport."""
    with httpx.Client(transport=mock_transport, base_url=BASE_URL) as test_client:
        yield test_client


@pytest.fixture
async def async_client(
    mock_transport: httpx.MockTransport,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async httpx client backed by the mock transport."""
    async with httpx.AsyncClient(transport=mock_transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def connection_refused() -> httpx.ConnectError:
    """A connection-refused transport error."""
    return httpx.ConnectError(
        "[Errno 111] Connection refused",
        request=httpx.Request("GET", f"{BASE_URL}/refused"),
    )
