"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from reqline.core.config import get_app_config


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Generator[None, None, None]:
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


# =============================================================================
# Stub Server Fixtures
# =============================================================================


class StubServer:
    """
    In-process stand-in for an HTTP server.

    Wraps httpx.MockTransport, records every request it receives and
    answers with a fixed response.

    Usage:
        server = StubServer(200, headers={"X-Test": "1"}, content=b"ok")
        async with create_http_client(transport=server.transport) as client:
            ...
        assert server.requests[0].method == "GET"
    """

    def __init__(
        self,
        status_code: int = 200,
        headers: dict[str, str] | list[tuple[str, str]] | None = None,
        content: bytes = b"",
    ) -> None:
        self.status_code = status_code
        self.headers = headers or {}
        self.content = content
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            headers=self.headers,
            content=self.content,
        )


@pytest.fixture
def stub_server() -> Callable[..., StubServer]:
    """Factory for StubServer instances."""

    def _make(**kwargs: Any) -> StubServer:
        return StubServer(**kwargs)

    return _make


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    """Transport that fails every request as if the host refused the connection."""

    def _handle(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(_handle)


@pytest.fixture
def gzip_mismatch_transport() -> httpx.MockTransport:
    """Transport whose body is declared gzip but is plain bytes."""

    def _handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"Content-Encoding": "gzip"},
            stream=httpx.ByteStream(b"this is not gzip"),
        )

    return httpx.MockTransport(_handle)
