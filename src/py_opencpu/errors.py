"""Error types for py-opencpu.

All errors inherit from OpenCPUError for easy catching at framework level.
Invocation errors carry the ErrorKind they were classified as, so callers
holding a ProgramError can still tell what actually failed.
"""

from __future__ import annotations

from py_opencpu.types import ErrorKind, Failure


class OpenCPUError(Exception):
    """Base class for all py-opencpu errors."""

    pass


class ConfigurationError(OpenCPUError):
    """Error in configuration (malformed base address, bad timeout)."""

    pass


class RPCError(OpenCPUError):
    """Base class for failures of a single remote invocation."""

    kind: ErrorKind = ErrorKind.UNRECOGNIZED_RESPONSE

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.url = url
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)

    def to_failure(self) -> Failure:
        """Express this error as a tagged Failure outcome."""
        return Failure(kind=self.kind, message=self.message, status_code=self.status_code)


class RequestMalformedError(RPCError):
    """Caller-side defect: unencodable body, or the server answered 400."""

    kind = ErrorKind.REQUEST_MALFORMED


class TransportFailureError(RPCError):
    """I/O failure while sending, or an unexpected redirect."""

    kind = ErrorKind.TRANSPORT_FAILURE


class ServerRejectedError(RPCError):
    """Server refused the call for a reason not attributable to the request."""

    kind = ErrorKind.SERVER_REJECTED


class ServerUnavailableError(RPCError):
    """Server is not responsive (502/503) or returned no content."""

    kind = ErrorKind.SERVER_UNAVAILABLE


class UnrecognizedResponseError(RPCError):
    """Server answered with a status code outside the known set."""

    kind = ErrorKind.UNRECOGNIZED_RESPONSE


_ERRORS_BY_KIND: dict[ErrorKind, type[RPCError]] = {
    cls.kind: cls
    for cls in (
        RequestMalformedError,
        TransportFailureError,
        ServerRejectedError,
        ServerUnavailableError,
        UnrecognizedResponseError,
    )
}


def error_for_failure(failure: Failure, url: str | None = None) -> RPCError:
    """Build the RPCError subclass matching a Failure's kind."""
    cls = _ERRORS_BY_KIND.get(failure.kind, RPCError)
    return cls(failure.message, url=url, status_code=failure.status_code)


class ProgramError(OpenCPUError):
    """Raised by a program when a computation cannot produce a Solution.

    The message is the underlying failure's message, unchanged. The
    underlying kind is kept on ``kind`` for diagnostics; it is
    PROGRAM_FAILURE when there is no more specific cause.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.PROGRAM_FAILURE,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.cause = cause
        super().__init__(message)
