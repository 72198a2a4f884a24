"""Programs: local adapters binding a runtime to one remote function."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from py_opencpu.errors import ProgramError
from py_opencpu.runtime import OpenCPURuntime
from py_opencpu.types import ErrorKind, Failure, Solution
from py_opencpu.values import Problem, Value

logger = logging.getLogger(__name__)


def to_program_error(failure: Failure) -> ProgramError:
    """Collapse an invocation failure into the caller-facing error.

    The message is kept verbatim and the original kind stays available
    as ``ProgramError.kind``.
    """
    return ProgramError(failure.message, kind=failure.kind)


@dataclass(frozen=True)
class RPCProgram:
    """Computes solutions by calling ``package::function`` on a runtime.

    Configuration is fixed at construction. Instances hold no mutable
    state and can be shared between threads.

    Usage:
        program = RPCProgram(runtime, "stats", "rnorm")
        solution = program.compute(JsonProblem({"n": 3}))
        solution.value.data  # [0.12, -0.45, 1.02]
    """

    runtime: OpenCPURuntime
    package: str
    function: str
    logger: logging.Logger = field(default=logger, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.package:
            raise ValueError("package must be a non-empty string")
        if not self.function:
            raise ValueError("function must be a non-empty string")

    def compute(self, problem: Problem) -> Solution:
        """Run the computation for ``problem``.

        Raises:
            ProgramError: If the problem cannot be serialized, the remote
                call fails, or the output is not valid JSON.
        """
        try:
            payload = problem.to_json()
        except (TypeError, ValueError) as e:
            raise ProgramError(
                f"Cannot serialize the problem: {e}",
                kind=ErrorKind.REQUEST_MALFORMED,
                cause=e,
            ) from e

        outcome = self.runtime.call(self.package, self.function, payload)
        if isinstance(outcome, Failure):
            raise to_program_error(outcome)

        self.logger.debug("Output of %s::%s: %s", self.package, self.function, outcome.body)

        try:
            value = Value.from_json(outcome.body)
        except ValueError as e:
            raise ProgramError(
                f"Cannot parse the output from the server: {e}",
                kind=ErrorKind.UNRECOGNIZED_RESPONSE,
                cause=e,
            ) from e

        return Solution(value=value)

    async def compute_async(self, problem: Problem) -> Solution:
        """Run ``compute`` on a worker thread.

        Wrap in ``asyncio.create_task`` to get a cancellable handle.
        Cancelling stops the wait; the blocking request itself runs to
        completion on its thread.
        """
        return await asyncio.to_thread(self.compute, problem)
