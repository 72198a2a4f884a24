"""Test fixtures for py-opencpu."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from py_opencpu import HttpxTransport, OpenCPURuntime, RuntimeConfig, TransportResponse

BASE_URL = "http://localhost:9999/ocpu"


class StubTransport:
    """Transport returning canned responses and recording requests."""

    def __init__(self, response: TransportResponse | Exception) -> None:
        self.response = response
        self.requests: list[tuple[str, str]] = []

    def execute(self, url: str, body: str) -> TransportResponse:
        self.requests.append((url, body))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def config() -> RuntimeConfig:
    return RuntimeConfig.from_url(BASE_URL)


@pytest.fixture
def make_runtime(config: RuntimeConfig) -> Callable[..., tuple[OpenCPURuntime, StubTransport]]:
    """Factory for a runtime wired to a StubTransport."""

    def _make(
        status_code: int = 200,
        body: str | None = None,
        error: Exception | None = None,
    ) -> tuple[OpenCPURuntime, StubTransport]:
        stub = StubTransport(error or TransportResponse(status_code=status_code, body=body))
        return OpenCPURuntime(config, transport=stub), stub

    return _make


@pytest.fixture
def mock_http() -> Callable[..., HttpxTransport]:
    """Factory for an HttpxTransport backed by httpx.MockTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxTransport:
        return HttpxTransport(transport=httpx.MockTransport(handler))

    return _make
