"""OpenCPU runtime: the JSON RPC invocation engine.

Usage:
    runtime = OpenCPURuntime(RuntimeConfig.from_url("http://localhost:9999/ocpu"))
    output = runtime.rpc("stats", "rnorm", '{"n": 3}')
"""

from __future__ import annotations

import logging

from py_opencpu.classifier import classify
from py_opencpu.config import RuntimeConfig
from py_opencpu.endpoints import rpc_url
from py_opencpu.errors import RPCError, error_for_failure
from py_opencpu.transport import HttpxTransport, Transport
from py_opencpu.types import Failure, Outcome, Success


class OpenCPURuntime:
    """Calls functions of R packages on an OpenCPU server.

    Holds no state across calls beyond its configuration. Each call
    resolves the endpoint, sends one POST and classifies the response.

    Args:
        config: Server address. Defaults to http://localhost:9999/ocpu.
        transport: Transport to send requests with. Defaults to an
                   HttpxTransport using the configured timeout.
        logger: Logger for request and outcome messages.
    """

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or RuntimeConfig()
        self._transport = transport or HttpxTransport(timeout=self._config.timeout)
        self._log = logger or logging.getLogger(__name__)

    @property
    def config(self) -> RuntimeConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def resolve(self, package: str, function: str) -> str:
        """Return the endpoint URL for ``package::function``."""
        return rpc_url(self.base_url, package, function)

    def call(self, package: str, function: str, payload: str) -> Outcome:
        """Invoke a remote function and return the classified outcome.

        Never raises for a failure the classifier or transport can
        express; those come back as a Failure.
        """
        url = self.resolve(package, function)
        self._log.info("Sending request to OpenCPU server (%s).", url)

        try:
            response = self._transport.execute(url, payload)
        except RPCError as e:
            self._log.error("%s", e.message)
            return e.to_failure()

        outcome = classify(response.status_code, response.body)
        if isinstance(outcome, Success):
            self._log.info("Response received successfully.")
        else:
            self._log.error("%s", outcome.message)
        return outcome

    def rpc(self, package: str, function: str, payload: str) -> str:
        """Invoke a remote function that consumes and produces JSON.

        Args:
            package: Name of the package the function lives in.
            function: Name of the function.
            payload: Function arguments as a JSON string.

        Returns:
            The response body, verbatim.

        Raises:
            RequestMalformedError: Unencodable input or a 400 response.
            TransportFailureError: I/O failure or a redirect.
            ServerUnavailableError: 502/503 or an empty 200 response.
            UnrecognizedResponseError: Any other status code.
        """
        outcome = self.call(package, function, payload)
        if isinstance(outcome, Failure):
            raise error_for_failure(outcome, url=self.resolve(package, function))
        return outcome.body
