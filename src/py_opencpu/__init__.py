"""py-opencpu: call R functions on an OpenCPU server over JSON RPC."""

# All errors (foundational)
from py_opencpu.errors import (
    ConfigurationError,
    OpenCPUError,
    ProgramError,
    RequestMalformedError,
    RPCError,
    ServerRejectedError,
    ServerUnavailableError,
    TransportFailureError,
    UnrecognizedResponseError,
)

# Configuration and engine
from py_opencpu.config import RuntimeConfig
from py_opencpu.program import RPCProgram
from py_opencpu.runtime import OpenCPURuntime
from py_opencpu.transport import HttpxTransport, Transport, TransportResponse

# Core types
from py_opencpu.types import ErrorKind, Failure, Outcome, Solution, Success
from py_opencpu.values import JsonProblem, Problem, RawJsonProblem, Value

__version__ = "0.1.0"

__all__ = [
    # Core
    "OpenCPURuntime",
    "RPCProgram",
    "RuntimeConfig",
    # Transport
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    # Types
    "ErrorKind",
    "Success",
    "Failure",
    "Outcome",
    "Solution",
    "Value",
    "Problem",
    "JsonProblem",
    "RawJsonProblem",
    # Errors
    "OpenCPUError",
    "ConfigurationError",
    "RPCError",
    "RequestMalformedError",
    "TransportFailureError",
    "ServerRejectedError",
    "ServerUnavailableError",
    "UnrecognizedResponseError",
    "ProgramError",
]
