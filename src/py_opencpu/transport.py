"""HTTP transport for JSON RPC calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from py_opencpu.errors import RequestMalformedError, TransportFailureError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class TransportResponse:
    """Status and body of a completed HTTP exchange.

    ``body`` is None when the response carried no content.
    """

    status_code: int
    body: str | None


@runtime_checkable
class Transport(Protocol):
    """Sends one JSON POST and returns the raw response."""

    def execute(self, url: str, body: str) -> TransportResponse: ...


class HttpxTransport:
    """Blocking transport built on httpx.

    A fresh client is created for every call, so nothing is shared
    between invocations. Redirects are not followed.

    Args:
        timeout: Request timeout in seconds, or None to wait indefinitely.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport

    def execute(self, url: str, body: str) -> TransportResponse:
        """POST ``body`` to ``url``.

        Raises:
            RequestMalformedError: If the body cannot be encoded as UTF-8 or
                the URL is invalid.
            TransportFailureError: If the request cannot be executed.
        """
        try:
            content = body.encode("utf-8")
        except UnicodeEncodeError as e:
            raise RequestMalformedError(
                "The encoding of the input is not supported.", url=url, cause=e
            ) from e

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                response = client.post(url, content=content, headers=JSON_HEADERS)
        except httpx.InvalidURL as e:
            raise RequestMalformedError(f"Invalid request URL: {e}", url=url, cause=e) from e
        except httpx.DecodingError as e:
            logger.debug("Cannot decode response from %s: %s", url, e)
            raise TransportFailureError(
                "Cannot read the output from the server response.", url=url, cause=e
            ) from e
        except httpx.RequestError as e:
            logger.debug("Transport error for %s: %s: %s", url, type(e).__name__, e)
            raise TransportFailureError(
                "Cannot execute the HTTP request.", url=url, cause=e
            ) from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.text if response.content else None,
        )
