"""Tests for error types."""

import pytest

from py_opencpu import (
    ConfigurationError,
    ErrorKind,
    Failure,
    OpenCPUError,
    ProgramError,
    RequestMalformedError,
    RPCError,
    ServerRejectedError,
    ServerUnavailableError,
    TransportFailureError,
    UnrecognizedResponseError,
)
from py_opencpu.errors import error_for_failure

RPC_ERRORS = [
    (RequestMalformedError, ErrorKind.REQUEST_MALFORMED),
    (TransportFailureError, ErrorKind.TRANSPORT_FAILURE),
    (ServerRejectedError, ErrorKind.SERVER_REJECTED),
    (ServerUnavailableError, ErrorKind.SERVER_UNAVAILABLE),
    (UnrecognizedResponseError, ErrorKind.UNRECOGNIZED_RESPONSE),
]


class TestErrorHierarchy:
    """Test that all errors inherit from OpenCPUError."""

    @pytest.mark.parametrize(("cls", "kind"), RPC_ERRORS)
    def test_rpc_errors(self, cls: type[RPCError], kind: ErrorKind) -> None:
        err = cls("msg")
        assert isinstance(err, RPCError)
        assert isinstance(err, OpenCPUError)
        assert err.kind is kind

    def test_program_error(self) -> None:
        assert isinstance(ProgramError("msg"), OpenCPUError)
        assert not isinstance(ProgramError("msg"), RPCError)

    def test_configuration_error(self) -> None:
        assert isinstance(ConfigurationError("bad"), OpenCPUError)


class TestRPCError:
    def test_attributes(self) -> None:
        err = RequestMalformedError("Bad Request: x", url="http://h/x", status_code=400)
        assert err.message == "Bad Request: x"
        assert err.url == "http://h/x"
        assert err.status_code == 400
        assert err.cause is None
        assert str(err) == "Bad Request: x"

    def test_keeps_cause(self) -> None:
        cause = OSError("reset")
        err = TransportFailureError("Cannot execute the HTTP request.", cause=cause)
        assert err.cause is cause

    def test_to_failure(self) -> None:
        err = ServerUnavailableError("Server is not responsive (502).", status_code=502)
        assert err.to_failure() == Failure(
            ErrorKind.SERVER_UNAVAILABLE, "Server is not responsive (502).", 502
        )


class TestErrorForFailure:
    @pytest.mark.parametrize(("cls", "kind"), RPC_ERRORS)
    def test_maps_kind_to_class(self, cls: type[RPCError], kind: ErrorKind) -> None:
        err = error_for_failure(Failure(kind, "message", 500), url="http://h")
        assert type(err) is cls
        assert err.message == "message"
        assert err.status_code == 500
        assert err.url == "http://h"


class TestProgramError:
    def test_kind_defaults_to_program_failure(self) -> None:
        err = ProgramError("failed")
        assert err.kind is ErrorKind.PROGRAM_FAILURE
        assert err.message == "failed"
        assert err.cause is None

    def test_keeps_cause(self) -> None:
        cause = ValueError("bad json")
        err = ProgramError("failed", kind=ErrorKind.UNRECOGNIZED_RESPONSE, cause=cause)
        assert err.cause is cause
