"""Value and problem types exchanged with the remote service.

These are deliberately thin: a Value is whatever the JSON parser
produced, and a Problem is anything that can render itself as JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class Value:
    """Structured data parsed from a JSON document."""

    data: Any

    @classmethod
    def from_json(cls, text: str) -> Value:
        """Parse JSON text into a Value.

        Raises:
            ValueError: If the text is not valid JSON.
        """
        return cls(json.loads(text))

    def to_json(self) -> str:
        return json.dumps(self.data, separators=(",", ":"))


@runtime_checkable
class Problem(Protocol):
    """A computation request that serializes itself to JSON."""

    def to_json(self) -> str: ...


@dataclass(frozen=True)
class JsonProblem:
    """Problem built from a mapping of named function arguments.

    Usage:
        problem = JsonProblem({"n": 3})
        problem.to_json()  # '{"n": 3}'
    """

    payload: Mapping[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(dict(self.payload))


@dataclass(frozen=True)
class RawJsonProblem:
    """Problem whose JSON text was produced elsewhere."""

    text: str

    def to_json(self) -> str:
        return self.text
