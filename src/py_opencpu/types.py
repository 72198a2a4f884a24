"""Core type definitions for py-opencpu.

Invocation outcomes are tagged values: the engine returns either a
Success carrying the raw response body or a Failure carrying an
ErrorKind and a message. Exceptions are raised only at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from py_opencpu.values import Value


class ErrorKind(str, Enum):
    """Failure taxonomy for remote invocations."""

    REQUEST_MALFORMED = "request_malformed"
    TRANSPORT_FAILURE = "transport_failure"
    SERVER_REJECTED = "server_rejected"
    SERVER_UNAVAILABLE = "server_unavailable"
    UNRECOGNIZED_RESPONSE = "unrecognized_response"
    PROGRAM_FAILURE = "program_failure"


@dataclass(frozen=True)
class Success:
    """Successful invocation with the response body, untouched."""

    body: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed invocation.

    Attributes:
        kind: What went wrong.
        message: Human readable message, surfaced verbatim to callers.
        status_code: HTTP status code when the failure came from a response.
    """

    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


Outcome = Success | Failure


def _empty_attributes() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Solution:
    """Result of a successful computation.

    Wraps the parsed value. Warnings and attributes are always empty:
    the remote service does not report either.
    """

    value: Value
    warnings: tuple[str, ...] = ()
    attributes: Mapping[str, Any] = field(default_factory=_empty_attributes)

    def has_value(self) -> bool:
        return self.value is not None

    def get_value(self) -> Value:
        return self.value

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def get_warnings(self) -> list[str]:
        return list(self.warnings)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str) -> Any:
        return self.attributes.get(name)

    def get_attributes(self) -> dict[str, Any]:
        return dict(self.attributes)

    def to_json(self) -> str:
        """Serialize the wrapped value back to JSON."""
        return self.value.to_json()
